"""Panel attributes and the options shared by every kind of panel."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable


@dataclass
class Panel:
    """Attributes common to all dashboard panels."""

    title: str
    span: float = 6.0
    height: str | None = None
    description: str | None = None
    transparent: bool = False
    datasource: str | None = None
    repeat: str | None = None
    is_new: bool = False
    targets: list[Any] = field(default_factory=list)


def span(value: float) -> Callable[[Panel], None]:
    """Set the width of the panel in grid units (1 to 12)."""

    def apply(panel: Panel) -> None:
        panel.span = value

    return apply


def height(value: str) -> Callable[[Panel], None]:
    """Set the height of the panel, e.g. "400px"."""

    def apply(panel: Panel) -> None:
        panel.height = value

    return apply


def description(content: str) -> Callable[[Panel], None]:
    """Annotate the panel with a human-readable description."""

    def apply(panel: Panel) -> None:
        panel.description = content

    return apply


def transparent() -> Callable[[Panel], None]:
    """Make the panel background transparent."""

    def apply(panel: Panel) -> None:
        panel.transparent = True

    return apply


def data_source(source: str) -> Callable[[Panel], None]:
    """Set the data source used by the panel."""

    def apply(panel: Panel) -> None:
        panel.datasource = source

    return apply


def repeat(variable: str) -> Callable[[Panel], None]:
    """Repeat the panel for each value of a template variable."""

    def apply(panel: Panel) -> None:
        panel.repeat = variable

    return apply