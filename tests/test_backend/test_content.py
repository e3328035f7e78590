"""Tests for the static content table."""

import pytest

from backend import content
from backend.content import (
    PAGES,
    entries_for,
    get_page,
    image_for,
    image_path,
    page_count,
)


class TestContentTable:
    """The reference table from the original screen."""

    def test_five_pages(self):
        assert page_count() == 5
        assert [page.index for page in PAGES] == [0, 1, 2, 3, 4]

    def test_first_page_has_thirty_entries_in_order(self):
        entries = entries_for(0)
        assert len(entries) == 30
        assert entries[0] == "First image item 1"
        assert entries[-1] == "First image item 30"
        assert list(entries) == [f"First image item {n}" for n in range(1, 31)]

    def test_fifth_page_skips_item_two(self):
        """Fifth page lists items 1 and 3, not 1 and 2."""
        assert entries_for(4) == ("Fifth image item 1", "Fifth image item 3")

    def test_titles_and_images(self):
        assert get_page(1).title == "Second image"
        assert image_for(2) == "third_image.png"

    def test_pages_are_immutable(self):
        with pytest.raises(AttributeError):
            PAGES[0].title = "changed"  # type: ignore[misc]

    def test_repeated_lookups_are_identical(self):
        assert entries_for(3) == entries_for(3)


class TestUnknownPages:
    """Unknown page ids degrade to empty results, never errors."""

    @pytest.mark.parametrize("page", [-1, 5, 99, None, "1", 1.0, True])
    def test_unknown_page_has_no_entries(self, page):
        assert entries_for(page) == ()
        assert get_page(page) is None
        assert image_for(page) is None
        assert image_path(page) is None


def test_image_path_resolves_against_images_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(content, "IMAGES_DIR", tmp_path)
    assert image_path(0) == tmp_path / "first_image.png"
