"""Custom templated variables."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Mapping

from dashkit.variables.template import Current, TemplateVariable, VariableOption


@dataclass
class Custom(TemplateVariable):
    """A "custom" templated variable."""

    type: str = "custom"
    value_map: dict[str, str] = field(default_factory=dict)


def _label_for(mapping: Mapping[str, str], value: str) -> str:
    return next((text for text, val in mapping.items() if val == value), value)


def new(name: str, *options: Callable[[Custom], None]) -> Custom:
    """Create a custom variable and apply the given options in order."""
    custom = Custom(name=name, label=name)
    for option in options:
        option(custom)
    return custom


def values(mapping: Mapping[str, str]) -> Callable[[Custom], None]:
    """Set the possible values, as a label to value mapping."""

    def apply(custom: Custom) -> None:
        custom.options.extend(
            VariableOption(text=text, value=value) for text, value in mapping.items()
        )
        custom.value_map = dict(mapping)
        custom.query = ",".join(sorted(mapping.values()))

    return apply


def default(value: str) -> Callable[[Custom], None]:
    """Set the default value of the variable."""

    def apply(custom: Custom) -> None:
        custom.current = Current(text=[_label_for(custom.value_map, value)], value=value)

    return apply