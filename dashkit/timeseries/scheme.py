"""Color schemes of a time series visualization."""

from __future__ import annotations

from enum import Enum
from typing import Callable

from dashkit.timeseries.fieldconfig import FieldConfig

SchemeOption = Callable[[FieldConfig], None]


class ColorMode(str, Enum):
    """Which value of a series picks its color."""

    LAST = "last"
    MIN = "min"
    MAX = "max"


def configure(field_config: FieldConfig, *options: SchemeOption) -> FieldConfig:
    """Apply the given color scheme options to a field configuration."""
    for option in options:
        option(field_config)
    return field_config


def single_color(color: str) -> SchemeOption:
    """Color every series with a single color."""

    def apply(config: FieldConfig) -> None:
        config.defaults.color.mode = "fixed"
        config.defaults.color.fixed_color = color

    return apply


def classic_palette() -> SchemeOption:
    """Use the classic palette."""

    def apply(config: FieldConfig) -> None:
        config.defaults.color.mode = "palette-classic"

    return apply


def _by_series(mode: str, color_by: ColorMode | str) -> SchemeOption:
    series_by = ColorMode(color_by).value

    def apply(config: FieldConfig) -> None:
        config.defaults.color.mode = mode
        config.defaults.color.series_by = series_by

    return apply


def thresholds_value(color_by: ColorMode | str) -> SchemeOption:
    """Use the threshold colors."""
    return _by_series("thresholds", color_by)


def green_yellow_red(color_by: ColorMode | str) -> SchemeOption:
    """Use the green-yellow-red scheme."""
    return _by_series("continuous-GrYlRd", color_by)


def yellow_red(color_by: ColorMode | str) -> SchemeOption:
    """Use the yellow-red scheme."""
    return _by_series("continuous-YlRd", color_by)


def yellow_blue(color_by: ColorMode | str) -> SchemeOption:
    """Use the yellow-blue scheme."""
    return _by_series("continuous-YlBl", color_by)


def red_yellow_green(color_by: ColorMode | str) -> SchemeOption:
    """Use the red-yellow-green scheme."""
    return _by_series("continuous-RdYlGr", color_by)


def blue_yellow_red(color_by: ColorMode | str) -> SchemeOption:
    """Use the blue-yellow-red scheme."""
    return _by_series("continuous-BlYlRd", color_by)


def blue_purple(color_by: ColorMode | str) -> SchemeOption:
    """Use the blue-purple scheme."""
    return _by_series("continuous-BlPu", color_by)