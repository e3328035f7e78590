"""Custom Textual widgets for the Gallery TUI."""

from .entry_list_item import EntryListItem
from .image_pager import ImagePager
from .page_indicator import PageIndicator

__all__ = [
    "EntryListItem",
    "ImagePager",
    "PageIndicator",
]
