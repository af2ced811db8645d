"""Table panels."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable

from dashkit.common import Panel, span


class AggregationType(str, Enum):
    """Aggregation functions applied to the values returned by a query."""

    AVG = "avg"
    COUNT = "count"
    CURRENT = "current"
    MIN = "min"
    MAX = "max"


@dataclass(frozen=True)
class Aggregation:
    """How to display an aggregate in the table."""

    label: str
    type: AggregationType


@dataclass
class ColumnStyle:
    """Styling rule applied to columns whose label matches a pattern."""

    pattern: str
    type: str
    alias: str | None = None


@dataclass
class Column:
    """A column shown when displaying time series aggregations."""

    text: str
    value: str


def _default_styles() -> list[ColumnStyle]:
    return [ColumnStyle(pattern="/.*/", type="string", alias="")]


@dataclass
class Table(Panel):
    """A panel displaying data as a table."""

    styles: list[ColumnStyle] = field(default_factory=_default_styles)
    transform: str = ""
    columns: list[Column] = field(default_factory=list)


def new(title: str, *options: Callable[[Table], None]) -> Table:
    """Create a table panel, apply the defaults, then the given options."""
    panel = Table(title=title)
    for option in (span(6), time_series_to_rows(), *options):
        option(panel)
    return panel


def hide_column(pattern: str) -> Callable[[Table], None]:
    """Hide the columns whose label matches the given pattern."""

    def apply(panel: Table) -> None:
        panel.styles.insert(0, ColumnStyle(pattern=pattern, type="hidden"))

    return apply


def _transform(name: str) -> Callable[[Table], None]:
    def apply(panel: Table) -> None:
        panel.transform = name

    return apply


def time_series_to_rows() -> Callable[[Table], None]:
    """Display the data in rows."""
    return _transform("timeseries_to_rows")


def time_series_to_columns() -> Callable[[Table], None]:
    """Display the data in columns."""
    return _transform("timeseries_to_columns")


def as_json() -> Callable[[Table], None]:
    """Display the data as JSON."""
    return _transform("json")


def as_table() -> Callable[[Table], None]:
    """Display the data as a table."""
    return _transform("table")


def as_annotations() -> Callable[[Table], None]:
    """Display the data as annotations."""
    return _transform("annotations")


def as_time_series_aggregations(
    aggregations: Iterable[Aggregation],
) -> Callable[[Table], None]:
    """Display the data according to the given aggregation methods."""
    columns = [
        Column(text=aggregation.label, value=AggregationType(aggregation.type).value)
        for aggregation in aggregations
    ]

    def apply(panel: Table) -> None:
        panel.transform = "timeseries_aggregations"
        panel.columns = list(columns)

    return apply