"""List item pairing an entry with its page's image."""

from pathlib import PurePath

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Label, ListItem

from frontend.utils import highlight_matches


class EntryListItem(ListItem):
    """List item for one filtered entry, with query matches emphasized."""

    DEFAULT_CSS = """
    EntryListItem {
        height: auto;
        padding: 0 1;
    }

    EntryListItem > Horizontal {
        height: auto;
    }

    EntryListItem .entry-thumb {
        width: 16;
        color: $accent;
    }

    EntryListItem .entry-text {
        padding-left: 2;
    }
    """

    def __init__(self, text: str, query: str = "", image: str | None = None, **kwargs):
        super().__init__(**kwargs)
        self.entry_text = text
        self.search_query = query
        self.image = image

    def compose(self) -> ComposeResult:
        thumb = PurePath(self.image).stem if self.image else ""
        with Horizontal():
            yield Label(f"◉ {escape(thumb)}", classes="entry-thumb")
            yield Label(highlight_matches(self.entry_text, self.search_query), classes="entry-text")
