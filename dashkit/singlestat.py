"""Single stat panels reducing a query to one summary value."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, Sequence

from dashkit.common import Panel, span

VALUE_TO_TEXT_MAPPING = 1
RANGE_TO_TEXT_MAPPING = 2


class StatType(str, Enum):
    """Function reducing a whole series into a single value."""

    MIN = "min"
    MAX = "max"
    AVG = "avg"
    CURRENT = "current"
    TOTAL = "total"
    FIRST = "first"
    DELTA = "delta"
    DIFF = "diff"
    RANGE = "range"
    NAME = "name"


@dataclass(frozen=True)
class ValueMap:
    """Maps a value onto explicit text."""

    value: str
    text: str
    op: str = "="


@dataclass(frozen=True)
class RangeMap:
    """Maps a range of values onto explicit text."""

    start: str
    end: str
    text: str


@dataclass
class SparkLine:
    """Spark line summary drawn behind the value."""

    show: bool = False
    full: bool = False
    line_color: str | None = None
    fill_color: str | None = None
    y_min: float | None = None
    y_max: float | None = None


def _default_mapping_types() -> list[tuple[str, int]]:
    return [
        ("value to text", VALUE_TO_TEXT_MAPPING),
        ("range to text", RANGE_TO_TEXT_MAPPING),
    ]


@dataclass
class SingleStat(Panel):
    """A panel displaying a single summary value."""

    format: str = ""
    decimals: int = 0
    sparkline: SparkLine = field(default_factory=SparkLine)
    value_name: str = ""
    value_font_size: str = ""
    prefix: str | None = None
    prefix_font_size: str | None = None
    postfix: str | None = None
    postfix_font_size: str | None = None
    color_value: bool = False
    color_background: bool = False
    thresholds: str = ""
    colors: list[str] = field(default_factory=list)
    value_maps: list[ValueMap] = field(default_factory=list)
    range_maps: list[RangeMap] = field(default_factory=list)
    mapping_type: int = VALUE_TO_TEXT_MAPPING
    mapping_types: list[tuple[str, int]] = field(default_factory=_default_mapping_types)


def _defaults() -> list[Callable[[SingleStat], None]]:
    return [
        span(6),
        value_font_size("100%"),
        value_type(StatType.AVG),
        colors(("#299c46", "rgba(237, 129, 40, 0.89)", "#d44a3a")),
        values_to_text([ValueMap(value="null", text="N/A")]),
        spark_line_color("rgb(31, 120, 193)"),
        spark_line_fill_color("rgba(31, 118, 189, 0.18)"),
    ]


def new(title: str, *options: Callable[[SingleStat], None]) -> SingleStat:
    """Create a single stat panel, apply the defaults, then the given options."""
    panel = SingleStat(title=title)
    for option in (*_defaults(), *options):
        option(panel)
    return panel


def unit(unit: str) -> Callable[[SingleStat], None]:
    """Set the unit of the displayed value."""

    def apply(panel: SingleStat) -> None:
        panel.format = unit

    return apply


def decimals(count: int) -> Callable[[SingleStat], None]:
    """Set the number of decimals to display."""

    def apply(panel: SingleStat) -> None:
        panel.decimals = count

    return apply


def spark_line() -> Callable[[SingleStat], None]:
    """Show a spark line summary of the series next to the value."""

    def apply(panel: SingleStat) -> None:
        panel.sparkline.show = True
        panel.sparkline.full = False

    return apply


def full_spark_line() -> Callable[[SingleStat], None]:
    """Show a full height spark line summary of the series."""

    def apply(panel: SingleStat) -> None:
        panel.sparkline.show = True
        panel.sparkline.full = True

    return apply


def spark_line_color(color: str) -> Callable[[SingleStat], None]:
    """Set the line color of the spark line."""

    def apply(panel: SingleStat) -> None:
        panel.sparkline.line_color = color

    return apply


def spark_line_fill_color(color: str) -> Callable[[SingleStat], None]:
    """Set the fill color of the spark line."""

    def apply(panel: SingleStat) -> None:
        panel.sparkline.fill_color = color

    return apply


def spark_line_y_min(value: float) -> Callable[[SingleStat], None]:
    """Set the smallest value expected on the spark line's Y axis."""

    def apply(panel: SingleStat) -> None:
        panel.sparkline.y_min = float(value)

    return apply


def spark_line_y_max(value: float) -> Callable[[SingleStat], None]:
    """Set the largest value expected on the spark line's Y axis."""

    def apply(panel: SingleStat) -> None:
        panel.sparkline.y_max = float(value)

    return apply


def value_type(stat_type: StatType | str) -> Callable[[SingleStat], None]:
    """Set how the series is reduced to a single value."""
    name = StatType(stat_type).value

    def apply(panel: SingleStat) -> None:
        panel.value_name = name

    return apply


def value_font_size(size: str) -> Callable[[SingleStat], None]:
    """Set the font size of the value, e.g. "100%"."""

    def apply(panel: SingleStat) -> None:
        panel.value_font_size = size

    return apply


def prefix(text: str) -> Callable[[SingleStat], None]:
    """Set the text shown before the value."""

    def apply(panel: SingleStat) -> None:
        panel.prefix = text

    return apply


def prefix_font_size(size: str) -> Callable[[SingleStat], None]:
    """Set the font size of the prefix, e.g. "110%"."""

    def apply(panel: SingleStat) -> None:
        panel.prefix_font_size = size

    return apply


def postfix(text: str) -> Callable[[SingleStat], None]:
    """Set the text shown after the value."""

    def apply(panel: SingleStat) -> None:
        panel.postfix = text

    return apply


def postfix_font_size(size: str) -> Callable[[SingleStat], None]:
    """Set the font size of the postfix, e.g. "110%"."""

    def apply(panel: SingleStat) -> None:
        panel.postfix_font_size = size

    return apply


def color_value() -> Callable[[SingleStat], None]:
    """Show the threshold colors on the value itself."""

    def apply(panel: SingleStat) -> None:
        panel.color_value = True

    return apply


def color_background() -> Callable[[SingleStat], None]:
    """Show the threshold colors in the background."""

    def apply(panel: SingleStat) -> None:
        panel.color_background = True

    return apply


def thresholds(values: Sequence[str]) -> Callable[[SingleStat], None]:
    """Set the two values splitting the stat into three colored ranges."""
    if len(values) != 2:
        raise ValueError(f"expected 2 threshold values, got {len(values)}")
    joined = ",".join(values)

    def apply(panel: SingleStat) -> None:
        panel.thresholds = joined

    return apply


def colors(values: Sequence[str]) -> Callable[[SingleStat], None]:
    """Set the three colors applied according to the threshold levels."""
    if len(values) != 3:
        raise ValueError(f"expected 3 colors, got {len(values)}")
    chosen = list(values)

    def apply(panel: SingleStat) -> None:
        panel.colors = list(chosen)

    return apply


def values_to_text(mapping: Iterable[ValueMap]) -> Callable[[SingleStat], None]:
    """Translate specific values of the stat into explicit text."""
    entries = [ValueMap(value=entry.value, text=entry.text) for entry in mapping]

    def apply(panel: SingleStat) -> None:
        panel.mapping_type = VALUE_TO_TEXT_MAPPING
        panel.value_maps = list(entries)

    return apply


def ranges_to_text(mapping: Iterable[RangeMap]) -> Callable[[SingleStat], None]:
    """Translate ranges of values of the stat into explicit text."""
    entries = list(mapping)

    def apply(panel: SingleStat) -> None:
        panel.mapping_type = RANGE_TO_TEXT_MAPPING
        panel.range_maps = list(entries)

    return apply