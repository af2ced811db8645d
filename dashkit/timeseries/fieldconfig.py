"""Field configuration shared by time series visualizations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ScaleDistribution:
    """Scale used for the values of an axis."""

    type: str = "linear"
    log: int = 0


@dataclass
class ColorConfig:
    """Color scheme applied to the series."""

    mode: str = ""
    fixed_color: str = ""
    series_by: str = ""


@dataclass
class ThresholdStep:
    """One threshold step; the base step has no value."""

    color: str
    value: float | None = None


@dataclass
class ThresholdsConfig:
    """Threshold values and how they are interpreted."""

    mode: str = ""
    steps: list[ThresholdStep] = field(default_factory=list)


@dataclass
class CustomFieldConfig:
    """Visualization-specific field settings."""

    line_width: int = 0
    fill_opacity: int = 0
    point_size: int = 0
    draw_style: str = ""
    line_interpolation: str = ""
    line_style: str = ""
    bar_alignment: int = 0
    gradient_mode: str = ""
    axis_placement: str = ""
    axis_label: str = ""
    axis_soft_min: int | None = None
    axis_soft_max: int | None = None
    scale_distribution: ScaleDistribution = field(default_factory=ScaleDistribution)
    thresholds_style: str = ""


@dataclass
class FieldDefaults:
    """Default settings applied to every field."""

    unit: str = ""
    decimals: int | None = None
    min: int | None = None
    max: int | None = None
    color: ColorConfig = field(default_factory=ColorConfig)
    thresholds: ThresholdsConfig = field(default_factory=ThresholdsConfig)
    custom: CustomFieldConfig = field(default_factory=CustomFieldConfig)


@dataclass
class OverrideProperty:
    """One overridden setting."""

    id: str
    value: Any


@dataclass
class Matcher:
    """Selects the fields an override applies to."""

    id: str = ""
    options: str = ""


@dataclass
class FieldOverride:
    """Settings overridden for the fields selected by a matcher."""

    matcher: Matcher = field(default_factory=Matcher)
    properties: list[OverrideProperty] = field(default_factory=list)


@dataclass
class FieldConfig:
    """Defaults and overrides of the fields of a visualization."""

    defaults: FieldDefaults = field(default_factory=FieldDefaults)
    overrides: list[FieldOverride] = field(default_factory=list)