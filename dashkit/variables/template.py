"""Templated dashboard variables and the options they share."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable


@dataclass(frozen=True)
class VariableOption:
    """One selectable option of a variable."""

    text: str
    value: str


@dataclass(frozen=True)
class Current:
    """The currently selected value of a variable."""

    text: list[str]
    value: str


@dataclass
class TemplateVariable:
    """A templated variable of a dashboard."""

    name: str
    label: str | None = None
    type: str = ""
    options: list[VariableOption] = field(default_factory=list)
    query: str = ""
    regex: str = ""
    hide: int = 0
    multi: bool = False
    include_all: bool = False
    all_value: str = ""
    current: Current | None = None
    refresh: int | None = None
    datasource: str | None = None
    sort: int = 0

    def __post_init__(self) -> None:
        if self.label is None:
            self.label = self.name


def label(text: str) -> Callable[[TemplateVariable], None]:
    """Set the label of the variable."""

    def apply(variable: TemplateVariable) -> None:
        variable.label = text

    return apply


def hide_label() -> Callable[[TemplateVariable], None]:
    """Keep the variable's label from being displayed."""

    def apply(variable: TemplateVariable) -> None:
        variable.hide = 1

    return apply


def hide() -> Callable[[TemplateVariable], None]:
    """Keep the variable from being displayed."""

    def apply(variable: TemplateVariable) -> None:
        variable.hide = 2

    return apply


def multi() -> Callable[[TemplateVariable], None]:
    """Allow several values to be selected."""

    def apply(variable: TemplateVariable) -> None:
        variable.multi = True

    return apply


def include_all() -> Callable[[TemplateVariable], None]:
    """Add an option selecting all values."""

    def apply(variable: TemplateVariable) -> None:
        variable.include_all = True
        variable.options.append(VariableOption(text="All", value="$__all"))

    return apply


def all_value(value: str) -> Callable[[TemplateVariable], None]:
    """Set the value used when the "All" option is selected."""

    def apply(variable: TemplateVariable) -> None:
        variable.all_value = value

    return apply


def regex(pattern: str) -> Callable[[TemplateVariable], None]:
    """Filter the values returned by the query with a regular expression."""

    def apply(variable: TemplateVariable) -> None:
        variable.regex = pattern

    return apply