"""Query templated variables."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable

from dashkit.variables.template import Current, TemplateVariable


class SortOrder(IntEnum):
    """Ordering applied to the values returned by the query."""

    NONE = 0
    ALPHABETICAL_ASC = 1
    ALPHABETICAL_DESC = 2
    NUMERICAL_ASC = 3
    NUMERICAL_DESC = 4
    ALPHABETICAL_NO_CASE_ASC = 5
    ALPHABETICAL_NO_CASE_DESC = 6


class RefreshInterval(IntEnum):
    """When the results of the query are refreshed."""

    NEVER = 0
    DASHBOARD_LOAD = 1
    TIME_CHANGE = 2


@dataclass
class Query(TemplateVariable):
    """A "query" templated variable."""

    type: str = "query"


def new(name: str, *options: Callable[[Query], None]) -> Query:
    """Create a query variable, refreshed on load unless told otherwise."""
    variable = Query(name=name, label=name)
    for option in (refresh(RefreshInterval.DASHBOARD_LOAD), *options):
        option(variable)
    return variable


def data_source(source: str) -> Callable[[Query], None]:
    """Set the data source the query runs against."""

    def apply(variable: Query) -> None:
        variable.datasource = source

    return apply


def request(text: str) -> Callable[[Query], None]:
    """Set the query to execute."""

    def apply(variable: Query) -> None:
        variable.query = text

    return apply


def sort(order: SortOrder | int) -> Callable[[Query], None]:
    """Set the order in which the values are sorted."""
    value = int(SortOrder(order))

    def apply(variable: Query) -> None:
        variable.sort = value

    return apply


def refresh(interval: RefreshInterval | int) -> Callable[[Query], None]:
    """Set when the values are refreshed."""
    value = int(RefreshInterval(interval))

    def apply(variable: Query) -> None:
        variable.refresh = value

    return apply


def default_all() -> Callable[[Query], None]:
    """Select the "All" option by default."""

    def apply(variable: Query) -> None:
        variable.current = Current(text=["All"], value="$__all")

    return apply