"""Backend data for Gallery - the static page/entry table."""

from backend.content import (
    PAGES,
    Page,
    entries_for,
    get_page,
    image_for,
    image_path,
    page_count,
)

__all__ = [
    "PAGES",
    "Page",
    "entries_for",
    "get_page",
    "image_for",
    "image_path",
    "page_count",
]
