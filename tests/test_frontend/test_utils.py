"""Tests for frontend utility functions."""

import pytest

from frontend.utils import (
    clamp_page_index,
    filter_entries,
    highlight_matches,
    indicator_flags,
    is_blank,
)

ENTRIES = [
    "Second image item 1",
    "Second image item 2",
    "Third image item 1",
    "second IMAGE item 1",
]


class TestFilterEntries:
    """Test filter_entries."""

    @pytest.mark.parametrize("query", ["", "   ", "\t\n", None])
    def test_blank_query_returns_entries_unchanged(self, query):
        assert filter_entries(ENTRIES, query) == ENTRIES

    def test_empty_entries(self):
        assert filter_entries([], "item") == []
        assert filter_entries([], "") == []

    def test_case_insensitive_substring(self):
        assert filter_entries(ENTRIES, "SECOND image") == [
            "Second image item 1",
            "Second image item 2",
            "second IMAGE item 1",
        ]

    def test_membership_matches_substring_test(self):
        """An entry is kept iff it contains the query ignoring case."""
        query = "item 1"
        result = filter_entries(ENTRIES, query)
        for entry in ENTRIES:
            assert (entry in result) == (query.lower() in entry.lower())

    def test_preserves_order_and_duplicates(self):
        entries = ["b item", "a item", "b item", "skip"]
        assert filter_entries(entries, "item") == ["b item", "a item", "b item"]

    def test_result_is_subsequence(self):
        result = filter_entries(ENTRIES, "1")
        positions = [ENTRIES.index(entry) for entry in result]
        assert positions == sorted(positions)

    def test_query_is_not_trimmed(self):
        """Surrounding spaces are part of the query."""
        assert filter_entries(["item 1", "item1"], " 1") == ["item 1"]

    def test_no_match(self):
        assert filter_entries(ENTRIES, "nonexistent-xyz") == []

    def test_accepts_tuples(self):
        assert filter_entries(tuple(ENTRIES), "third") == ["Third image item 1"]


class TestIsBlank:
    def test_blank_values(self):
        assert is_blank("")
        assert is_blank("  ")
        assert is_blank(None)

    def test_non_blank(self):
        assert not is_blank(" a ")


class TestClampPageIndex:
    @pytest.mark.parametrize(
        "index,expected", [(-3, 0), (0, 0), (2, 2), (4, 4), (5, 4), (100, 4)]
    )
    def test_clamps_into_range(self, index, expected):
        assert clamp_page_index(index, 5) == expected

    def test_zero_count(self):
        assert clamp_page_index(3, 0) == 0


class TestHighlightMatches:
    def test_wraps_match_in_bold(self):
        assert (
            highlight_matches("Second image item 1", "item")
            == "Second image [bold]item[/bold] 1"
        )

    def test_preserves_original_case(self):
        assert highlight_matches("Second image", "second") == "[bold]Second[/bold] image"

    def test_multiple_occurrences(self):
        assert highlight_matches("a1 a2", "A") == "[bold]a[/bold]1 [bold]a[/bold]2"

    def test_blank_query_returns_text(self):
        assert highlight_matches("Third image item 2", "  ") == "Third image item 2"

    def test_escapes_markup_in_entry(self):
        result = highlight_matches("[red]item[/red]", "zzz")
        assert result == r"\[red]item\[/red]"

    def test_query_with_regex_characters(self):
        assert highlight_matches("price (1)", "(1)") == "price [bold](1)[/bold]"


    def test_folds_case_like_filter(self):
        # "ß" folds to "ss", so both spellings find each other
        assert filter_entries(["STRASSE"], "straße") == ["STRASSE"]
        assert highlight_matches("STRASSE", "straße") == "[bold]STRASSE[/bold]"
        assert highlight_matches("Straße", "SS") == "Stra[bold]ß[/bold]e"

    def test_partial_fold_highlights_whole_character(self):
        assert highlight_matches("Maß", "s") == "Ma[bold]ß[/bold]"

    @pytest.mark.parametrize("query", ["item 1", "SECOND", "ß", "ss", "ǅ"])
    def test_every_filtered_entry_is_highlighted(self, query):
        entries = ["Second image item 1", "Straße", "MASS", "ǆungla", "Third"]
        for entry in filter_entries(entries, query):
            assert "[bold]" in highlight_matches(entry, query)


def test_indicator_flags():
    assert indicator_flags(2, 4) == (False, False, True, False)
