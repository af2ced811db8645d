# dashkit

dashkit builds dashboard panels and template variables as plain Python
dataclasses. Each kind of panel or variable has a `new` function that takes a
title or name and any number of options. An option is a small callable that
changes the object. Defaults are applied first, then your options in the
order given, so a later option wins over an earlier one.

It has no runtime dependencies.

## Installation

```
pip install dashkit
```

With the test dependencies:

```
pip install "dashkit[test]"
```

## Panels

Every panel is a `dashkit.common.Panel` with a title, a span (6 by default),
and optional height, description, transparency, data source and repeat
variable. The options in `dashkit.common` work on any panel: `span`,
`height`, `description`, `transparent`, `data_source` and `repeat`.

### Text

```python
from dashkit import text
from dashkit.common import height, description

panel = text.new("Notes", text.markdown("*hello*"), height("400px"), description("About"))
assert panel.mode == "markdown"
```

`text.html(content)` sets the content to be rendered as HTML.

### Table

```python
from dashkit import table

panel = table.new(
    "Requests",
    table.hide_column("Time.*"),
    table.as_time_series_aggregations([
        table.Aggregation(label="Average", type=table.AggregationType.AVG),
    ]),
)
```

A table starts with one catch-all string column style (`/.*/`) and the
`timeseries_to_rows` transform. `hide_column` puts a hidden style in front
of the existing ones. The other transforms are `time_series_to_columns`,
`as_json`, `as_table` and `as_annotations`.

### Single stat

```python
from dashkit import singlestat

panel = singlestat.new(
    "Uptime",
    singlestat.unit("bytes"),
    singlestat.value_type(singlestat.StatType.CURRENT),
    singlestat.thresholds(("20", "30")),
    singlestat.spark_line(),
)
assert panel.thresholds == "20,30"
```

By default a single stat reduces its series with `avg`, uses three threshold
colors, and maps `null` to `N/A`. `thresholds` takes exactly two values and
`colors` exactly three; any other count raises `ValueError`.
`values_to_text` and `ranges_to_text` take lists of `ValueMap` and
`RangeMap` and switch the panel's mapping type. The spark line options are
`spark_line`, `full_spark_line`, `spark_line_color`, `spark_line_fill_color`,
`spark_line_y_min` and `spark_line_y_max`.

### Time series

```python
from dashkit.timeseries import timeseries, axis, fields, scheme, threshold

panel = timeseries.new(
    "Latency",
    timeseries.lines(timeseries.LineInterpolationMode.SMOOTH),
    timeseries.legend(timeseries.LegendOption.AS_TABLE, timeseries.LegendOption.MAX),
    timeseries.axis(axis.unit("s"), axis.decimals(2)),
    timeseries.thresholds(threshold.steps(threshold.Step(color="red", value=10))),
    timeseries.color_scheme(scheme.classic_palette()),
    timeseries.field_override(fields.by_query("A"), fields.unit("short")),
)
```

A time series panel keeps its settings in a
`dashkit.timeseries.fieldconfig.FieldConfig`. The `axis` and `scheme`
modules change a `FieldConfig` through their `configure` function, and
`threshold.new` does so through a `Threshold`, which first sets line style,
absolute values and a green base color. `threshold.steps` always puts a base
step, with no value, in front of the steps you give.

`fields` provides the matchers `by_name` and `by_query` and the overrides
`unit`, `fill_opacity` and `fixed_color_scheme` used with
`timeseries.field_override`.

## Template variables

```python
from dashkit.variables import constant, custom, datasource, interval, query
from dashkit.variables.template import label, include_all

percentile = constant.new("percentile", constant.values({"90th": "90", "99th": "99"}),
                          constant.default("90"))
versions = custom.new("api_version", custom.values({"v1": "v1-value"}), include_all())
source = datasource.new("source", datasource.source_type("prometheus"))
step = interval.new("interval", interval.values(["12h", "30s", "5m"]))
codes = query.new("code", query.request("label_values(http_requests_total, code)"),
                  query.sort(query.SortOrder.ALPHABETICAL_ASC), label("Status code"))
```

All variables are `dashkit.variables.template.TemplateVariable` objects.
The options in that module apply to any of them: `label`, `hide_label`,
`hide`, `multi`, `include_all`, `all_value` and `regex`.

- `constant.values` and `custom.values` take a label to value mapping; the
  query is the values sorted and joined with commas. Their `default` shows
  the matching label, or the value itself when no label matches.
- `interval.values` orders the durations from shortest to longest (values
  that cannot be parsed count as zero). `interval.parse_duration("1h30m")`
  returns a `datetime.timedelta`; it accepts the units y, w, d, h, m, s and
  ms and raises `ValueError` on anything else.
- `query.new` refreshes on dashboard load unless `query.refresh` says
  otherwise; `query.default_all` selects the "All" option.
- `datasource.new` also refreshes on dashboard load.

## What dashkit does not do

dashkit only builds the panel and variable objects. It does not assemble
them into a dashboard, turn them into JSON, or talk to any server. Panels
have a `targets` list, but the package provides no options that create
queries for it, and it has no alerting options.