"""Mutable screen state holders: the search query and the active page.

Both holders are owned by a single screen instance and live only as long as
it does. They have no Textual dependencies.
"""

import logging
from collections.abc import Callable

from frontend.utils import clamp_page_index

logger = logging.getLogger("gallery")

PageListener = Callable[[int, int], None]


class SearchState:
    """Holds the current search query. Any string, including empty, is valid."""

    def __init__(self, query: str = ""):
        self._query = query

    @property
    def query(self) -> str:
        return self._query

    @property
    def is_blank(self) -> bool:
        return not self._query.strip()

    def set(self, query: str) -> bool:
        """Commit a new query. Returns True if the value changed."""
        if query == self._query:
            return False
        self._query = query
        return True


class PageState:
    """Holds the active carousel page index.

    The index is always in [0, page_count - 1]. Subscribers are called with
    (old_index, new_index) after every actual change; assigning the current
    index again is silent.
    """

    def __init__(self, page_count: int, index: int = 0):
        if page_count <= 0:
            raise ValueError(f"page_count must be positive, got {page_count}")
        self._page_count = page_count
        self._index = clamp_page_index(index, page_count)
        self._listeners: list[PageListener] = []

    @property
    def index(self) -> int:
        return self._index

    @property
    def page_count(self) -> int:
        return self._page_count

    def subscribe(self, listener: PageListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: PageListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def navigate_to(self, index: int) -> bool:
        """Programmatic navigation.

        Raises:
            ValueError: If index is outside [0, page_count - 1].

        Returns:
            True if the active page changed.
        """
        if not 0 <= index < self._page_count:
            raise ValueError(
                f"Page index {index} out of range (0..{self._page_count - 1})"
            )
        return self._assign(index)

    def swipe_to(self, index: int) -> bool:
        """User gesture: any requested index is clamped into range first."""
        clamped = clamp_page_index(index, self._page_count)
        if clamped != index:
            logger.debug("Clamped swipe target %d to %d", index, clamped)
        return self._assign(clamped)

    def _assign(self, index: int) -> bool:
        if index == self._index:
            return False
        old = self._index
        self._index = index
        logger.debug("Active page %d -> %d", old, index)
        for listener in list(self._listeners):
            listener(old, index)
        return True
