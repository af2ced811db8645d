"""Threshold settings of a time series visualization."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from dashkit.timeseries.fieldconfig import FieldConfig, ThresholdStep


class Mode(str, Enum):
    """How threshold values are interpreted."""

    PERCENTAGE = "percentage"
    ABSOLUTE = "absolute"


class DisplayStyle(str, Enum):
    """How thresholds are drawn."""

    OFF = "off"
    AS_FILLED_REGIONS = "area"
    AS_LINES = "line"
    BOTH = "line+area"


@dataclass(frozen=True)
class Step:
    """A user-defined threshold step."""

    color: str
    value: float


@dataclass
class Threshold:
    """Threshold settings bound to a field configuration."""

    field_config: FieldConfig
    base_color: str = ""


ThresholdOption = Callable[[Threshold], None]


def new(field_config: FieldConfig, *options: ThresholdOption) -> Threshold:
    """Apply the defaults, then the given options, to a field configuration."""
    threshold = Threshold(field_config=field_config)
    defaults = (
        style(DisplayStyle.AS_LINES),
        value_mode(Mode.ABSOLUTE),
        base_color("green"),
    )
    for option in (*defaults, *options):
        option(threshold)
    return threshold


def style(display_style: DisplayStyle | str) -> ThresholdOption:
    """Set how the thresholds are displayed."""
    value = DisplayStyle(display_style).value

    def apply(threshold: Threshold) -> None:
        threshold.field_config.defaults.custom.thresholds_style = value

    return apply


def base_color(color: str) -> ThresholdOption:
    """Set the color of the base step."""

    def apply(threshold: Threshold) -> None:
        threshold.base_color = color

    return apply


def value_mode(mode: Mode | str) -> ThresholdOption:
    """Set how the threshold values are interpreted."""
    value = Mode(mode).value

    def apply(threshold: Threshold) -> None:
        threshold.field_config.defaults.thresholds.mode = value

    return apply


def steps(*user_steps: Step) -> ThresholdOption:
    """Set the threshold steps, preceded by a base step in the base color."""
    chosen = list(user_steps)

    def apply(threshold: Threshold) -> None:
        threshold.field_config.defaults.thresholds.steps = [
            ThresholdStep(color=threshold.base_color),
            *(ThresholdStep(color=step.color, value=float(step.value)) for step in chosen),
        ]

    return apply