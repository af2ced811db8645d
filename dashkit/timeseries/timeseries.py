"""Time series panels."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Callable

from dashkit.common import Panel, span
from dashkit.timeseries import axis as _axis
from dashkit.timeseries import scheme as _scheme
from dashkit.timeseries import threshold as _threshold
from dashkit.timeseries.fieldconfig import FieldConfig, FieldOverride


class TooltipMode(str, Enum):
    """Which series are displayed in the tooltip."""

    SINGLE_SERIES = "single"
    ALL_SERIES = "multi"
    NO_SERIES = "none"


class LineInterpolationMode(str, Enum):
    """How points are joined when series are drawn as lines."""

    LINEAR = "linear"
    SMOOTH = "smooth"
    STEP_BEFORE = "stepBefore"
    STEP_AFTER = "stepAfter"


class BarAlignment(IntEnum):
    """Where bars are drawn relative to their point."""

    ALIGN_BEFORE = -1
    ALIGN_CENTER = 0
    ALIGN_AFTER = 1


class GradientType(str, Enum):
    """Mode of the gradient fill."""

    NO_GRADIENT = "none"
    OPACITY = "opacity"
    HUE = "hue"
    SCHEME = "scheme"


class LegendOption(IntEnum):
    """What the legend shows and how."""

    HIDE = 0
    AS_TABLE = 1
    AS_LIST = 2
    BOTTOM = 3
    TO_THE_RIGHT = 4
    MIN = 5
    MAX = 6
    AVG = 7
    FIRST = 8
    FIRST_NON_NULL = 9
    LAST = 10
    LAST_NON_NULL = 11
    TOTAL = 12
    COUNT = 13
    RANGE = 14


_DISPLAY_MODES = {
    LegendOption.HIDE: "hidden",
    LegendOption.AS_LIST: "list",
    LegendOption.AS_TABLE: "table",
}

_PLACEMENTS = {
    LegendOption.TO_THE_RIGHT: "right",
    LegendOption.BOTTOM: "bottom",
}

_CALCS = {
    LegendOption.FIRST: "first",
    LegendOption.FIRST_NON_NULL: "firstNotNull",
    LegendOption.LAST: "last",
    LegendOption.LAST_NON_NULL: "lastNotNull",
    LegendOption.MIN: "min",
    LegendOption.MAX: "max",
    LegendOption.AVG: "mean",
    LegendOption.COUNT: "count",
    LegendOption.TOTAL: "sum",
    LegendOption.RANGE: "range",
}


@dataclass
class Legend:
    """Legend settings of a time series panel."""

    display_mode: str = "list"
    placement: str = "bottom"
    calcs: list[str] = field(default_factory=list)


@dataclass
class TimeSeries(Panel):
    """A panel displaying time series."""

    tooltip: str = ""
    legend: Legend = field(default_factory=Legend)
    field_config: FieldConfig = field(default_factory=FieldConfig)


TimeSeriesOption = Callable[[TimeSeries], None]


def _defaults() -> list[TimeSeriesOption]:
    return [
        span(6),
        line_width(1),
        fill_opacity(25),
        point_size(5),
        tooltip(TooltipMode.SINGLE_SERIES),
        legend(LegendOption.BOTTOM, LegendOption.AS_LIST),
        lines(LineInterpolationMode.LINEAR),
        gradient_mode(GradientType.OPACITY),
        axis(
            _axis.placement(_axis.PlacementMode.AUTO),
            _axis.scale(_axis.ScaleMode.LINEAR),
        ),
    ]


def new(title: str, *options: TimeSeriesOption) -> TimeSeries:
    """Create a time series panel, apply the defaults, then the given options."""
    panel = TimeSeries(title=title)
    for option in (*_defaults(), *options):
        option(panel)
    return panel


def tooltip(mode: TooltipMode | str) -> TimeSeriesOption:
    """Set which series the tooltip shows."""
    value = TooltipMode(mode).value

    def apply(panel: TimeSeries) -> None:
        panel.tooltip = value

    return apply


def line_width(value: int) -> TimeSeriesOption:
    """Set the width of the series lines (0 to 10)."""

    def apply(panel: TimeSeries) -> None:
        panel.field_config.defaults.custom.line_width = value

    return apply


def fill_opacity(value: int) -> TimeSeriesOption:
    """Set the fill opacity of the series."""

    def apply(panel: TimeSeries) -> None:
        panel.field_config.defaults.custom.fill_opacity = value

    return apply


def point_size(value: int) -> TimeSeriesOption:
    """Set the size of the points."""

    def apply(panel: TimeSeries) -> None:
        panel.field_config.defaults.custom.point_size = value

    return apply


def lines(mode: LineInterpolationMode | str) -> TimeSeriesOption:
    """Draw the series as solid lines with the given interpolation."""
    interpolation = LineInterpolationMode(mode).value

    def apply(panel: TimeSeries) -> None:
        custom = panel.field_config.defaults.custom
        custom.line_interpolation = interpolation
        custom.draw_style = "line"
        custom.line_style = "solid"

    return apply


def bars(alignment: BarAlignment | int) -> TimeSeriesOption:
    """Draw the series as bars with the given alignment."""
    value = int(BarAlignment(alignment))

    def apply(panel: TimeSeries) -> None:
        custom = panel.field_config.defaults.custom
        custom.bar_alignment = value
        custom.draw_style = "bars"

    return apply


def points() -> TimeSeriesOption:
    """Draw the series as points."""

    def apply(panel: TimeSeries) -> None:
        panel.field_config.defaults.custom.draw_style = "points"

    return apply


def gradient_mode(mode: GradientType | str) -> TimeSeriesOption:
    """Set the mode of the gradient fill."""
    value = GradientType(mode).value

    def apply(panel: TimeSeries) -> None:
        panel.field_config.defaults.custom.gradient_mode = value

    return apply


def axis(*options: _axis.AxisOption) -> TimeSeriesOption:
    """Configure the axis."""

    def apply(panel: TimeSeries) -> None:
        _axis.configure(panel.field_config, *options)

    return apply


def thresholds(*options: _threshold.ThresholdOption) -> TimeSeriesOption:
    """Configure the thresholds."""

    def apply(panel: TimeSeries) -> None:
        _threshold.new(panel.field_config, *options)

    return apply


def color_scheme(*options: _scheme.SchemeOption) -> TimeSeriesOption:
    """Configure the color scheme."""

    def apply(panel: TimeSeries) -> None:
        _scheme.configure(panel.field_config, *options)

    return apply


def legend(*options: LegendOption | int) -> TimeSeriesOption:
    """Set what the legend shows; later options win for mode and placement."""
    chosen = [LegendOption(option) for option in options]

    def apply(panel: TimeSeries) -> None:
        result = Legend()
        for option in chosen:
            if option in _DISPLAY_MODES:
                result.display_mode = _DISPLAY_MODES[option]
            elif option in _PLACEMENTS:
                result.placement = _PLACEMENTS[option]
            else:
                result.calcs.append(_CALCS[option])
        panel.legend = result

    return apply


def field_override(
    matcher: Callable[[FieldOverride], None],
    *options: Callable[[FieldOverride], None],
) -> TimeSeriesOption:
    """Override settings for the fields selected by the matcher."""

    def apply(panel: TimeSeries) -> None:
        override = FieldOverride()
        matcher(override)
        for option in options:
            option(override)
        panel.field_config.overrides.append(override)

    return apply