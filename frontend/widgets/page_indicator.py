"""Row of dots showing which carousel page is active."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text
from textual.reactive import reactive
from textual.widget import Widget

if TYPE_CHECKING:
    from textual.app import RenderResult


class PageIndicator(Widget):
    """One dot per page; the active page's dot uses the accent style.

    Styles come from component classes so themes can recolor the dots.
    """

    COMPONENT_CLASSES = {
        "page-indicator--active",
        "page-indicator--inactive",
    }

    DEFAULT_CSS = """
    PageIndicator {
        width: 100%;
        height: 1;
        content-align: center middle;
        text-align: center;
    }

    PageIndicator > .page-indicator--active {
        color: $error;
        text-style: bold;
    }

    PageIndicator > .page-indicator--inactive {
        color: $text-muted;
    }
    """

    indicator: reactive[tuple[bool, ...]] = reactive(())

    @property
    def active_index(self) -> int | None:
        for index, active in enumerate(self.indicator):
            if active:
                return index
        return None

    def render(self) -> RenderResult:
        active_style = self.get_component_rich_style("page-indicator--active")
        inactive_style = self.get_component_rich_style("page-indicator--inactive")

        text = Text(justify="center")
        for index, active in enumerate(self.indicator):
            if index:
                text.append("  ")
            if active:
                text.append("●", style=active_style)
            else:
                text.append("○", style=inactive_style)
        return text
