"""Constant templated variables."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Mapping

from dashkit.variables.template import Current, TemplateVariable, VariableOption


@dataclass
class Constant(TemplateVariable):
    """A "constant" templated variable."""

    type: str = "constant"
    value_map: dict[str, str] = field(default_factory=dict)


def _label_for(mapping: Mapping[str, str], value: str) -> str:
    return next((text for text, val in mapping.items() if val == value), value)


def new(name: str, *options: Callable[[Constant], None]) -> Constant:
    """Create a constant variable and apply the given options in order."""
    constant = Constant(name=name, label=name)
    for option in options:
        option(constant)
    return constant


def values(mapping: Mapping[str, str]) -> Callable[[Constant], None]:
    """Set the possible values, as a label to value mapping."""

    def apply(constant: Constant) -> None:
        constant.options.extend(
            VariableOption(text=text, value=value) for text, value in mapping.items()
        )
        constant.value_map = dict(mapping)
        constant.query = ",".join(sorted(mapping.values()))

    return apply


def default(value: str) -> Callable[[Constant], None]:
    """Set the default value of the variable."""

    def apply(constant: Constant) -> None:
        constant.current = Current(
            text=[_label_for(constant.value_map, value)], value=value
        )

    return apply