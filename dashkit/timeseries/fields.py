"""Matchers and overrides for individual fields of a visualization."""

from __future__ import annotations

from typing import Callable

from dashkit.timeseries.fieldconfig import FieldOverride, OverrideProperty

MatcherOption = Callable[[FieldOverride], None]
OverrideOption = Callable[[FieldOverride], None]


def _matching(matcher_id: str, options: str) -> MatcherOption:
    def apply(override: FieldOverride) -> None:
        override.matcher.id = matcher_id
        override.matcher.options = options

    return apply


def by_name(name: str) -> MatcherOption:
    """Match the field with the given name."""
    return _matching("byName", name)


def by_query(ref: str) -> MatcherOption:
    """Match every field returned by the given query."""
    return _matching("byFrameRefID", ref)


def _property(property_id: str, value: object) -> OverrideOption:
    def apply(override: FieldOverride) -> None:
        override.properties.append(OverrideProperty(id=property_id, value=value))

    return apply


def unit(unit: str) -> OverrideOption:
    """Override the unit."""
    return _property("unit", unit)


def fill_opacity(opacity: int) -> OverrideOption:
    """Override the fill opacity."""
    return _property("custom.fillOpacity", opacity)


def fixed_color_scheme(color: str) -> OverrideOption:
    """Force a fixed color."""
    return _property("color", {"mode": "fixed", "fixedColor": color})