"""Carousel pane showing the active page's image."""

from pathlib import Path

from textual import events
from textual.message import Message
from textual.widgets import Static

from rich.markup import escape


class ImagePager(Static):
    """Shows the active page's image handle, its resolved path and the title.

    The pager never changes pages itself: clicking the left or right half
    posts PageRequested with the neighbouring index and the screen decides.
    Requested indices are not range-checked here.
    """

    class PageRequested(Message):
        """Posted when the user asks for another page."""

        def __init__(self, index: int) -> None:
            self.index = index
            super().__init__()

    DEFAULT_CSS = """
    ImagePager {
        width: 100%;
        height: 9;
        border: round $accent;
        border-title-align: center;
        border-subtitle-align: right;
        content-align: center middle;
        text-align: center;
    }
    """

    def __init__(self, **kwargs):
        super().__init__("", **kwargs)
        self.page_index = 0
        self.image: str | None = None
        self.image_missing = False

    def show_page(
        self,
        page_index: int,
        page_count: int,
        title: str,
        image: str | None,
        image_path: Path | None = None,
    ) -> None:
        self.page_index = page_index
        self.image = image
        self.image_missing = image_path is not None and not image_path.is_file()
        self.border_title = title
        self.border_subtitle = f"{page_index + 1}/{page_count}"

        content = f"‹  [b]{escape(image or 'no image')}[/b]  ›"
        if image_path is not None:
            location = escape(str(image_path))
            if self.image_missing:
                content += f"\n[dim]{location}[/dim] [red](missing)[/red]"
            else:
                content += f"\n[dim]{location}[/dim]"
        self.update(content)

    def on_click(self, event: events.Click) -> None:
        if event.x < self.size.width // 2:
            self.post_message(self.PageRequested(self.page_index - 1))
        else:
            self.post_message(self.PageRequested(self.page_index + 1))
