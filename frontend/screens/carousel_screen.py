"""Carousel screen: paged images above a searchable entry list."""

import logging

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.screen import Screen
from textual.widgets import Footer, Header, Input, ListView, Static

from backend.settings import AUTO_NAVIGATE, INITIAL_PAGE
from frontend.state.carousel_state_machine import (
    CarouselOutput,
    CarouselStateMachine,
)
from frontend.widgets import EntryListItem, ImagePager, PageIndicator

logger = logging.getLogger("gallery")


class CarouselScreen(Screen):
    """Single screen with the image carousel, page dots, search field and list."""

    DEFAULT_CSS = """
    CarouselScreen #carousel {
        height: auto;
    }

    CarouselScreen #page-indicator {
        margin: 1 0;
    }

    CarouselScreen #search-input {
        margin: 0 1;
    }

    CarouselScreen #entries-empty {
        height: 1;
        padding: 0 2;
        color: $text-muted;
    }

    CarouselScreen #entries-list {
        height: 1fr;
        margin-top: 1;
    }
    """

    BINDINGS = [
        Binding("left", "previous_page", "Prev", show=True),
        Binding("right", "next_page", "Next", show=True),
        Binding("slash", "focus_search", "Search", show=True),
        Binding("escape", "clear_search", "Clear", show=True),
        Binding("q", "app.quit", "Quit", show=True),
    ]

    carousel_output: reactive[CarouselOutput | None] = reactive(None)

    def __init__(
        self,
        initial_page: int = INITIAL_PAGE,
        auto_navigate: bool = AUTO_NAVIGATE,
    ):
        super().__init__()
        self.machine = CarouselStateMachine(
            initial_page=initial_page, auto_navigate=auto_navigate
        )

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False, icon="")
        yield Vertical(
            ImagePager(id="image-pager"),
            PageIndicator(id="page-indicator"),
            id="carousel",
        )
        # Pinned above the list so it stays visible however long the list gets
        yield Input(placeholder="Search", id="search-input")
        yield Static("", id="entries-empty")
        yield ListView(id="entries-list")
        yield Footer()

    def on_mount(self) -> None:
        self.carousel_output = self.machine.output
        self.query_one("#search-input", Input).focus()

    # Input events

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id != "search-input":
            return
        self.carousel_output = self.machine.apply_event("set_query", query=event.value)

    def on_image_pager_page_requested(self, message: ImagePager.PageRequested) -> None:
        self._swipe(message.index)

    def action_previous_page(self) -> None:
        self._swipe(self.machine.page_index - 1)

    def action_next_page(self) -> None:
        self._swipe(self.machine.page_index + 1)

    def action_focus_search(self) -> None:
        self.query_one("#search-input", Input).focus()

    def action_clear_search(self) -> None:
        search = self.query_one("#search-input", Input)
        if search.value:
            # Input.Changed routes the cleared query through the machine
            search.value = ""

    def _swipe(self, index: int) -> None:
        logger.debug("Swipe requested to page %d", index)
        self.carousel_output = self.machine.apply_event("swipe_to", index=index)

    # Rendering

    def watch_carousel_output(
        self, old: CarouselOutput | None, new: CarouselOutput | None
    ) -> None:
        """Single watcher re-renders every widget from the view model."""
        if new is None:
            return

        try:
            pager = self.query_one("#image-pager", ImagePager)
            indicator = self.query_one("#page-indicator", PageIndicator)
            empty_msg = self.query_one("#entries-empty", Static)
            entries_list = self.query_one("#entries-list", ListView)
        except NoMatches:
            logger.debug("Carousel widgets not mounted; skipping render")
            return

        with self.app.batch_update():
            pager.show_page(
                new.page_index, new.page_count, new.title, new.image, new.image_path
            )
            indicator.indicator = new.indicator

            if new.message:
                empty_msg.update(new.message)
                empty_msg.display = True
            else:
                empty_msg.display = False

            if (
                old is None
                or old.entries != new.entries
                or old.query != new.query
                or old.image != new.image
            ):
                entries_list.clear()
                entries_list.extend(
                    EntryListItem(entry, new.query, new.image) for entry in new.entries
                )
