"""Auto-navigation: move the carousel to the first page matching a query."""

import logging

from backend.content import entries_for, page_count as content_page_count
from frontend.state.screen_state import PageState
from frontend.utils import filter_entries

logger = logging.getLogger("gallery")


def find_target_page(query: str, page_count: int | None = None) -> int | None:
    """Return the lowest page index whose filtered entries are non-empty.

    Pages are scanned in ascending order, so ties go to the lowest index
    regardless of which page is currently active. Returns None when no page
    matches.
    """
    count = content_page_count() if page_count is None else page_count
    for page in range(count):
        if filter_entries(entries_for(page), query):
            return page
    return None


class AutoNavigator:
    """Reacts to committed query values by navigating the page state.

    Runs once per distinct query: a query equal to the one that triggered the
    previous run is ignored. Page changes never trigger a run.
    """

    def __init__(
        self,
        page_state: PageState,
        enabled: bool = True,
        last_query: str | None = None,
    ):
        self._page_state = page_state
        self._last_query = last_query
        self.enabled = enabled

    @property
    def last_query(self) -> str | None:
        """The query that triggered the most recent run, or None before the first."""
        return self._last_query

    def on_query_changed(self, query: str) -> int | None:
        """Navigate to the first matching page if it isn't already active.

        Returns:
            The page navigated to, or None when nothing moved.
        """
        if not self.enabled:
            return None
        if query == self._last_query:
            return None
        self._last_query = query

        target = find_target_page(query, self._page_state.page_count)
        if target is None:
            logger.debug("No page matches query %r", query)
            return None
        if target == self._page_state.index:
            return None

        self._page_state.navigate_to(target)
        logger.info("Auto-navigated to page %d for query %r", target, query)
        return target
