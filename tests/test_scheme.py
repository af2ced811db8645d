import pytest

from dashkit.timeseries import scheme
from dashkit.timeseries.fieldconfig import FieldConfig


def test_single_color():
    cfg = scheme.configure(FieldConfig(), scheme.single_color("red"))

    assert cfg.defaults.color.mode == "fixed"
    assert cfg.defaults.color.fixed_color == "red"


def test_classic_palette():
    cfg = scheme.configure(FieldConfig(), scheme.classic_palette())

    assert cfg.defaults.color.mode == "palette-classic"


@pytest.mark.parametrize(
    "option, expected_mode",
    [
        (scheme.thresholds_value, "thresholds"),
        (scheme.green_yellow_red, "continuous-GrYlRd"),
        (scheme.yellow_red, "continuous-YlRd"),
        (scheme.yellow_blue, "continuous-YlBl"),
        (scheme.red_yellow_green, "continuous-RdYlGr"),
        (scheme.blue_yellow_red, "continuous-BlYlRd"),
        (scheme.blue_purple, "continuous-BlPu"),
    ],
)
def test_series_schemes(option, expected_mode):
    cfg = scheme.configure(FieldConfig(), option(scheme.ColorMode.MAX))

    assert cfg.defaults.color.mode == expected_mode
    assert cfg.defaults.color.series_by == scheme.ColorMode.MAX.value


def test_unknown_color_mode_is_rejected():
    with pytest.raises(ValueError):
        scheme.yellow_red("median")