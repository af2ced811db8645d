from dashkit.variables import datasource, template


def test_new_datasource_variables_can_be_created():
    variable = datasource.new("source")

    assert variable.name == "source"
    assert variable.label == "source"
    assert variable.type == "datasource"
    assert variable.refresh == datasource.DASHBOARD_LOAD == 1
    assert variable.options == []


def test_label_can_be_set():
    variable = datasource.new("datasource var", template.label("QueryVariable"))

    assert variable.name == "datasource var"
    assert variable.label == "QueryVariable"


def test_label_can_be_hidden():
    assert datasource.new("", template.hide_label()).hide == 1


def test_variable_can_be_hidden():
    assert datasource.new("", template.hide()).hide == 2


def test_multiple_variables_can_be_selected():
    assert datasource.new("", template.multi()).multi is True


def test_an_option_to_include_all_can_be_added():
    variable = datasource.new("", template.include_all())

    assert variable.include_all is True
    assert [(o.text, o.value) for o in variable.options] == [("All", "$__all")]


def test_values_can_be_filtered_by_regex():
    pattern = "^4\\d+$"
    assert datasource.new("", template.regex(pattern)).regex == pattern


def test_data_source_type_can_be_set():
    assert datasource.new("", datasource.source_type("prometheus")).query == "prometheus"