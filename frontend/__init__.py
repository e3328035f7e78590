"""Frontend package for the Gallery TUI."""

from frontend.screens.carousel_screen import CarouselScreen
from frontend.widgets import EntryListItem, ImagePager, PageIndicator
from frontend.utils import filter_entries

__all__ = [
    "CarouselScreen",
    "EntryListItem",
    "ImagePager",
    "PageIndicator",
    "filter_entries",
]
