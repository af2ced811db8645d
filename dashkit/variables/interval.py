"""Interval templated variables."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Iterable

from dashkit.variables.template import Current, TemplateVariable, VariableOption

_DURATION_RE = re.compile(
    r"^(?:(\d+)y)?(?:(\d+)w)?(?:(\d+)d)?(?:(\d+)h)?(?:(\d+)m)?(?:(\d+)s)?(?:(\d+)ms)?$"
)

_UNITS = (
    timedelta(days=365),
    timedelta(weeks=1),
    timedelta(days=1),
    timedelta(hours=1),
    timedelta(minutes=1),
    timedelta(seconds=1),
    timedelta(milliseconds=1),
)


def parse_duration(text: str) -> timedelta:
    """Parse a duration such as "1h30m" (units y, w, d, h, m, s, ms)."""
    if text == "0":
        return timedelta(0)
    if text == "":
        raise ValueError("empty duration string")
    match = _DURATION_RE.match(text)
    if match is None:
        raise ValueError(f"not a valid duration string: {text!r}")
    return sum(
        (unit * int(amount) for unit, amount in zip(_UNITS, match.groups()) if amount),
        timedelta(0),
    )


def _sort_key(text: str) -> timedelta:
    try:
        return parse_duration(text)
    except ValueError:
        return timedelta(0)


@dataclass
class Interval(TemplateVariable):
    """An "interval" templated variable."""

    type: str = "interval"


def new(name: str, *options: Callable[[Interval], None]) -> Interval:
    """Create an interval variable and apply the given options in order."""
    variable = Interval(name=name, label=name)
    for option in options:
        option(variable)
    return variable


def values(durations: Iterable[str]) -> Callable[[Interval], None]:
    """Set the possible values, ordered by duration; unparsable ones count as zero."""
    ordered = sorted(durations, key=_sort_key)

    def apply(variable: Interval) -> None:
        variable.options.extend(VariableOption(text=value, value=value) for value in ordered)
        variable.query = ",".join(ordered)

    return apply


def default(value: str) -> Callable[[Interval], None]:
    """Set the default value of the variable."""

    def apply(variable: Interval) -> None:
        variable.current = Current(text=[value], value=value)

    return apply