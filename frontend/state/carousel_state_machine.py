"""Carousel state machine binding the active page, the query and the filtered list.

This module provides a pure logic state machine (no Textual dependencies). User
input is applied through explicit update operations (set_query, swipe_to,
navigate_to); after every update the machine re-derives its state and exposes
a CarouselOutput view model that the screen renders.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from statemachine import State, StateMachine

from backend.content import (
    entries_for,
    get_page,
    image_path,
    page_count as content_page_count,
)
from frontend.state.auto_navigation import AutoNavigator, find_target_page
from frontend.state.screen_state import PageState, SearchState
from frontend.utils import filter_entries, indicator_flags, is_blank

logger = logging.getLogger("gallery")


def derive_view(page_index: int, query: str) -> tuple[str, ...]:
    """Entries of the given page that match query, in display order."""
    return tuple(filter_entries(entries_for(page_index), query))


@dataclass(frozen=True)
class CarouselOutput:
    """Output state from the carousel state machine."""

    page_index: int
    """Active carousel page."""

    page_count: int
    """Number of carousel pages."""

    title: str
    """Title of the active page."""

    image: str | None
    """Image handle of the active page, shown in the pager and on each list row."""

    image_path: Path | None
    """Image handle resolved against the configured images directory."""

    query: str
    """Committed search query."""

    entries: tuple[str, ...]
    """Filtered entries of the active page."""

    indicator: tuple[bool, ...]
    """One flag per page, True for the active page."""

    message: str | None
    """Empty-list message, or None when entries are shown."""

    filtering: bool
    """Whether a non-blank query is narrowing the list."""


class CarouselStateMachine(StateMachine):
    """State machine for the carousel screen.

    States:
    - browsing: Blank query, the active page's entries are all shown.
    - filtering: Non-blank query with matches on the active page.
    - no_matches: Non-blank query, the active page's filtered list is empty.
      Either no page matches, or the user swiped away from the matching page.

    The machine listens to its Page State, so every page change (swipe,
    navigation or auto-navigation) sends a `refresh` event, and set_query sends
    one for the query itself. The guards read the committed page and query,
    so the transition table is total and routing never fails.
    The auto-navigator is keyed on the query alone: swipes and navigation
    never re-run it.

    Example:
        >>> machine = CarouselStateMachine()
        >>> output = machine.set_query("second image item 1")
        >>> output.page_index
        1
        >>> machine.current_state == machine.filtering
        True
    """

    # States
    browsing = State(initial=True)
    filtering = State()
    no_matches = State()

    # Events
    refresh = (
        browsing.to(browsing, cond="_query_blank")
        | browsing.to(filtering, cond="_page_has_matches")
        | browsing.to(no_matches)
        | filtering.to(browsing, cond="_query_blank")
        | filtering.to(filtering, cond="_page_has_matches")
        | filtering.to(no_matches)
        | no_matches.to(browsing, cond="_query_blank")
        | no_matches.to(filtering, cond="_page_has_matches")
        | no_matches.to(no_matches)
    )

    def __init__(
        self,
        initial_page: int = 0,
        auto_navigate: bool = True,
        page_count: int | None = None,
    ):
        """Initialize the carousel state machine.

        Args:
            initial_page: Page shown first. Clamped into range.
            auto_navigate: Whether query changes may move the carousel.
            page_count: Number of pages; defaults to the content table size.
        """
        super().__init__()
        count = content_page_count() if page_count is None else page_count
        self.search = SearchState()
        self.page = PageState(count, initial_page)
        # The starting query counts as handled so a configured initial page is kept
        self.navigator = AutoNavigator(
            self.page, enabled=auto_navigate, last_query=self.search.query
        )
        self.page.subscribe(self._on_page_changed)

    @property
    def page_index(self) -> int:
        return self.page.index

    @property
    def query(self) -> str:
        return self.search.query

    @property
    def output(self) -> CarouselOutput:
        """Derive the view model from the committed page and query."""
        index = self.page.index
        query = self.search.query
        entries = derive_view(index, query)
        page = get_page(index)

        message = None
        if not entries and not is_blank(query):
            if find_target_page(query, self.page.page_count) is not None:
                message = "No matches on this page"
            else:
                message = "No matches"

        return CarouselOutput(
            page_index=index,
            page_count=self.page.page_count,
            title=page.title if page else "",
            image=page.image if page else None,
            image_path=image_path(index),
            query=query,
            entries=entries,
            indicator=indicator_flags(index, self.page.page_count),
            message=message,
            filtering=not is_blank(query),
        )

    # Guard conditions for routing

    def _query_blank(self, **data) -> bool:
        """Guard: query is empty or whitespace."""
        return is_blank(data.get("query", self.search.query))

    def _page_has_matches(self, **data) -> bool:
        """Guard: active page has entries under the query."""
        index = data.get("page_index", self.page.index)
        query = data.get("query", self.search.query)
        return bool(derive_view(index, query))

    # Updates

    def set_query(self, query: str = "") -> CarouselOutput:
        """Commit a query, run auto-navigation for it, then re-derive state."""
        if self.search.set(query):
            logger.debug("Query committed: %r", query)
        self.navigator.on_query_changed(self.search.query)
        return self._refresh()

    def swipe_to(self, index: int) -> CarouselOutput:
        """Apply a user page selection. The query is left untouched."""
        self.page.swipe_to(index)
        return self.output

    def navigate_to(self, index: int) -> CarouselOutput:
        """Programmatic navigation; raises ValueError for an invalid index."""
        self.page.navigate_to(index)
        return self.output

    def _on_page_changed(self, old: int, new: int) -> None:
        """Page State listener: re-route whenever the active page moves."""
        logger.debug("Page changed %d -> %d", old, new)
        self.send("refresh")

    def _refresh(self) -> CarouselOutput:
        self.send("refresh")
        return self.output

    def apply_event(self, event_name: str, **data) -> CarouselOutput:
        """Apply an input event and return updated output.

        Args:
            event_name: One of "set_query", "swipe_to", "navigate_to".
            **data: Event arguments (query for set_query, index otherwise).

        Returns:
            Updated output state after event processing. Unknown events are
            logged and leave state unchanged.
        """
        handlers = {
            "set_query": self.set_query,
            "swipe_to": self.swipe_to,
            "navigate_to": self.navigate_to,
        }
        handler = handlers.get(event_name)
        if handler is None:
            logger.error("Unknown carousel event %s", event_name)
            return self.output
        return handler(**data)
