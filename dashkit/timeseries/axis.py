"""Axis settings of a time series visualization."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Callable

from dashkit.timeseries.fieldconfig import FieldConfig, ScaleDistribution

AxisOption = Callable[[FieldConfig], None]


class PlacementMode(str, Enum):
    """Where the axis is displayed."""

    HIDDEN = "hidden"
    AUTO = "auto"
    LEFT = "left"
    RIGHT = "right"


class ScaleMode(IntEnum):
    """Distribution of the axis scale."""

    LINEAR = 0
    LOG2 = 1
    LOG10 = 2


_SCALES = {
    ScaleMode.LINEAR: ("linear", 0),
    ScaleMode.LOG2: ("log", 2),
    ScaleMode.LOG10: ("log", 10),
}


def configure(field_config: FieldConfig, *options: AxisOption) -> FieldConfig:
    """Apply the given axis options to a field configuration."""
    for option in options:
        option(field_config)
    return field_config


def placement(mode: PlacementMode | str) -> AxisOption:
    """Set where the axis is placed in the panel."""
    value = PlacementMode(mode).value

    def apply(config: FieldConfig) -> None:
        config.defaults.custom.axis_placement = value

    return apply


def soft_min(value: int) -> AxisOption:
    """Set a soft minimum for the axis."""

    def apply(config: FieldConfig) -> None:
        config.defaults.custom.axis_soft_min = value

    return apply


def soft_max(value: int) -> AxisOption:
    """Set a soft maximum for the axis."""

    def apply(config: FieldConfig) -> None:
        config.defaults.custom.axis_soft_max = value

    return apply


def minimum(value: int) -> AxisOption:
    """Set a hard minimum for the axis."""

    def apply(config: FieldConfig) -> None:
        config.defaults.min = value

    return apply


def maximum(value: int) -> AxisOption:
    """Set a hard maximum for the axis."""

    def apply(config: FieldConfig) -> None:
        config.defaults.max = value

    return apply


def unit(unit: str) -> AxisOption:
    """Set the unit of the displayed data."""

    def apply(config: FieldConfig) -> None:
        config.defaults.unit = unit

    return apply


def scale(mode: ScaleMode | int) -> AxisOption:
    """Set the scale used for the axis values."""
    kind, log = _SCALES[ScaleMode(mode)]

    def apply(config: FieldConfig) -> None:
        config.defaults.custom.scale_distribution = ScaleDistribution(type=kind, log=log)

    return apply


def label(text: str) -> AxisOption:
    """Set the text label of the axis."""

    def apply(config: FieldConfig) -> None:
        config.defaults.custom.axis_label = text

    return apply


def decimals(count: int) -> AxisOption:
    """Set how many decimals are displayed."""

    def apply(config: FieldConfig) -> None:
        config.defaults.decimals = count

    return apply