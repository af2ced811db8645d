"""Datasource templated variables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from dashkit.variables.template import TemplateVariable

DASHBOARD_LOAD = 1


@dataclass
class Datasource(TemplateVariable):
    """A "datasource" templated variable, refreshed on dashboard load."""

    type: str = "datasource"
    refresh: int | None = DASHBOARD_LOAD


def new(name: str, *options: Callable[[Datasource], None]) -> Datasource:
    """Create a datasource variable and apply the given options in order."""
    variable = Datasource(name=name, label=name)
    for option in options:
        option(variable)
    return variable


def source_type(datasource_type: str) -> Callable[[Datasource], None]:
    """Set the kind of data source listed, e.g. "prometheus"."""

    def apply(variable: Datasource) -> None:
        variable.query = datasource_type

    return apply