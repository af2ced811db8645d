import pytest

from dashkit import common
from dashkit.timeseries import axis, fields, scheme, threshold
from dashkit.timeseries import timeseries as ts


def test_new_time_series_panels_can_be_created():
    panel = ts.new("TimeSeries panel")
    assert panel.is_new is False
    assert panel.title == "TimeSeries panel"
    assert panel.span == 6


def test_defaults_are_applied():
    panel = ts.new("")
    custom = panel.field_config.defaults.custom
    assert custom.line_width == 1
    assert custom.fill_opacity == 25
    assert custom.point_size == 5
    assert panel.tooltip == "single"
    assert panel.legend == ts.Legend(display_mode="list", placement="bottom", calcs=[])
    assert custom.line_interpolation == "linear"
    assert custom.draw_style == "line"
    assert custom.line_style == "solid"
    assert custom.gradient_mode == "opacity"
    assert custom.axis_placement == "auto"
    assert custom.scale_distribution.type == "linear"


def test_width_can_be_configured():
    assert ts.new("", common.span(6)).span == 6


def test_height_can_be_configured():
    assert ts.new("", common.height("400px")).height == "400px"


def test_background_can_be_transparent():
    assert ts.new("", common.transparent()).transparent is True


def test_description_can_be_set():
    assert ts.new("", common.description("lala")).description == "lala"


def test_data_source_can_be_configured():
    panel = ts.new("", common.data_source("prometheus-default"))
    assert panel.datasource == "prometheus-default"


def test_line_width_can_be_configured():
    panel = ts.new("", ts.line_width(3))
    assert panel.field_config.defaults.custom.line_width == 3


def test_fill_opacity_can_be_configured():
    panel = ts.new("", ts.fill_opacity(10))
    assert panel.field_config.defaults.custom.fill_opacity == 10


def test_point_size_can_be_configured():
    panel = ts.new("", ts.point_size(3))
    assert panel.field_config.defaults.custom.point_size == 3


def test_repeat_can_be_configured():
    assert ts.new("", common.repeat("ds")).repeat == "ds"


def test_tooltip_can_be_configured():
    assert ts.new("", ts.tooltip(ts.TooltipMode.ALL_SERIES)).tooltip == "multi"


def test_legend_can_be_hidden():
    panel = ts.new("", ts.legend(ts.LegendOption.HIDE))
    assert panel.legend.display_mode == "hidden"


def test_legend_can_be_displayed_as_a_table():
    panel = ts.new("", ts.legend(ts.LegendOption.AS_TABLE))
    assert panel.legend.display_mode == "table"


def test_legend_can_be_displayed_as_a_list():
    panel = ts.new("", ts.legend(ts.LegendOption.AS_LIST))
    assert panel.legend.display_mode == "list"


def test_legend_can_be_shown_to_the_right():
    panel = ts.new("", ts.legend(ts.LegendOption.TO_THE_RIGHT))
    assert panel.legend.placement == "right"


def test_legend_can_be_shown_to_the_bottom():
    panel = ts.new("", ts.legend(ts.LegendOption.BOTTOM))
    assert panel.legend.placement == "bottom"


@pytest.mark.parametrize(
    "option, expected",
    [
        (ts.LegendOption.MIN, "min"),
        (ts.LegendOption.MAX, "max"),
        (ts.LegendOption.AVG, "mean"),
        (ts.LegendOption.TOTAL, "sum"),
        (ts.LegendOption.COUNT, "count"),
        (ts.LegendOption.RANGE, "range"),
        (ts.LegendOption.FIRST, "first"),
        (ts.LegendOption.FIRST_NON_NULL, "firstNotNull"),
        (ts.LegendOption.LAST, "last"),
        (ts.LegendOption.LAST_NON_NULL, "lastNotNull"),
    ],
)
def test_legend_can_show_calculated_data(option, expected):
    panel = ts.new("", ts.legend(option))
    assert expected in panel.legend.calcs


def test_legend_calcs_keep_their_order():
    panel = ts.new("", ts.legend(ts.LegendOption.MAX, ts.LegendOption.MIN))
    assert panel.legend.calcs == ["max", "min"]


@pytest.mark.parametrize(
    "mode, expected",
    [
        (ts.LineInterpolationMode.LINEAR, "linear"),
        (ts.LineInterpolationMode.SMOOTH, "smooth"),
        (ts.LineInterpolationMode.STEP_BEFORE, "stepBefore"),
        (ts.LineInterpolationMode.STEP_AFTER, "stepAfter"),
    ],
)
def test_line_interpolation_can_be_configured(mode, expected):
    panel = ts.new("", ts.lines(mode))
    assert panel.field_config.defaults.custom.line_interpolation == expected
    assert panel.field_config.defaults.custom.draw_style == "line"


@pytest.mark.parametrize(
    "alignment, expected",
    [
        (ts.BarAlignment.ALIGN_CENTER, 0),
        (ts.BarAlignment.ALIGN_BEFORE, -1),
        (ts.BarAlignment.ALIGN_AFTER, 1),
    ],
)
def test_bars_alignment_can_be_configured(alignment, expected):
    panel = ts.new("", ts.bars(alignment))
    assert panel.field_config.defaults.custom.bar_alignment == expected
    assert panel.field_config.defaults.custom.draw_style == "bars"


def test_series_can_be_displayed_as_points():
    panel = ts.new("", ts.points())
    assert panel.field_config.defaults.custom.draw_style == "points"


def test_axis_can_be_configured():
    panel = ts.new("", ts.axis(axis.decimals(2)))
    assert panel.field_config.defaults.decimals == 2


@pytest.mark.parametrize(
    "mode, expected",
    [
        (ts.GradientType.NO_GRADIENT, "none"),
        (ts.GradientType.OPACITY, "opacity"),
        (ts.GradientType.HUE, "hue"),
        (ts.GradientType.SCHEME, "scheme"),
    ],
)
def test_gradient_mode_can_be_configured(mode, expected):
    panel = ts.new("", ts.gradient_mode(mode))
    assert panel.field_config.defaults.custom.gradient_mode == expected


def test_field_overrides_can_be_defined():
    panel = ts.new("", ts.field_override(fields.by_query("A"), fields.unit("short")))
    overrides = panel.field_config.overrides
    assert len(overrides) == 1
    assert overrides[0].matcher.id == "byFrameRefID"
    assert overrides[0].matcher.options == "A"
    assert overrides[0].properties[0].value == "short"


def test_thresholds_can_be_defined():
    panel = ts.new(
        "",
        ts.thresholds(threshold.steps(threshold.Step(color="green", value=10))),
    )
    assert len(panel.field_config.defaults.thresholds.steps) == 2


def test_color_scheme_can_be_defined():
    panel = ts.new("", ts.color_scheme(scheme.single_color("yellow")))
    assert panel.field_config.defaults.color.mode == "fixed"
    assert panel.field_config.defaults.color.fixed_color == "yellow"


def test_invalid_legend_option_is_rejected():
    with pytest.raises(ValueError):
        ts.legend(99)