"""Text panels rendering HTML or markdown content."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from dashkit.common import Panel


@dataclass
class Text(Panel):
    """A panel displaying free-form text."""

    mode: str = ""
    content: str = ""


def new(title: str, *options: Callable[[Text], None]) -> Text:
    """Create a text panel and apply the given options in order."""
    panel = Text(title=title, span=6)
    for option in options:
        option(panel)
    return panel


def html(content: str) -> Callable[[Text], None]:
    """Set the content of the panel, rendered as HTML."""

    def apply(panel: Text) -> None:
        panel.mode = "html"
        panel.content = content

    return apply


def markdown(content: str) -> Callable[[Text], None]:
    """Set the content of the panel, rendered as markdown."""

    def apply(panel: Text) -> None:
        panel.mode = "markdown"
        panel.content = content

    return apply