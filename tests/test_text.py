from dashkit import text
from dashkit.common import description, height, span, transparent


def test_new_text_panels_can_be_created():
    panel = text.new("Text panel")

    assert panel.is_new is False
    assert panel.title == "Text panel"
    assert panel.span == 6
    assert panel.content == ""
    assert panel.mode == ""


def test_text_panels_can_be_html():
    content = "<b>lala</b>"
    panel = text.new("", text.html(content))

    assert panel.content == content
    assert panel.mode == "html"


def test_text_panels_can_be_markdown():
    content = "*lala*"
    panel = text.new("", text.markdown(content))

    assert panel.content == content
    assert panel.mode == "markdown"


def test_text_panel_width_can_be_configured():
    panel = text.new("", span(6))
    assert panel.span == 6


def test_text_panel_height_can_be_configured():
    panel = text.new("", height("400px"))
    assert panel.height == "400px"


def test_text_panel_background_can_be_transparent():
    panel = text.new("", transparent())
    assert panel.transparent is True


def test_text_panel_description_can_be_set():
    panel = text.new("", description("lala"))
    assert panel.description == "lala"


def test_last_content_option_wins():
    panel = text.new("", text.html("<i>a</i>"), text.markdown("*b*"))
    assert panel.mode == "markdown"
    assert panel.content == "*b*"