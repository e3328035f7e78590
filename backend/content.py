"""Static content table: carousel pages and their list entries.

The table is built once at import time and never mutated. Image handles are
plain resource file names; `image_path` resolves them against IMAGES_DIR.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from backend.settings import IMAGES_DIR


@dataclass(frozen=True)
class Page:
    """One carousel slide with its image handle and ordered entries."""

    index: int
    title: str
    image: str
    entries: tuple[str, ...]


def _build_pages() -> tuple[Page, ...]:
    return (
        Page(0, "First image", "first_image.png",
             tuple(f"First image item {n}" for n in range(1, 31))),
        Page(1, "Second image", "second_image.png",
             ("Second image item 1", "Second image item 2")),
        Page(2, "Third image", "third_image.png",
             ("Third image item 1", "Third image item 2")),
        Page(3, "Fourth image", "fourth_image.png",
             ("Fourth image item 1", "Fourth image item 2")),
        Page(4, "Fifth image", "fifth_image.png",
             ("Fifth image item 1", "Fifth image item 3")),
    )


PAGES: tuple[Page, ...] = _build_pages()


def page_count() -> int:
    return len(PAGES)


def get_page(page: int | None) -> Page | None:
    """Return the page for an identifier, or None if there is no such page."""
    if not isinstance(page, int) or isinstance(page, bool):
        return None
    if 0 <= page < len(PAGES):
        return PAGES[page]
    return None


def entries_for(page: int | None) -> tuple[str, ...]:
    """Entries of a page in display order; unknown pages have no entries."""
    found = get_page(page)
    return found.entries if found else ()


def image_for(page: int | None) -> str | None:
    found = get_page(page)
    return found.image if found else None


def image_path(page: int | None) -> Path | None:
    """Resolve a page's image handle to a file path (the file need not exist)."""
    image = image_for(page)
    return IMAGES_DIR / image if image else None
