"""Utility functions for the Gallery TUI frontend."""

from collections.abc import Iterable

from rich.markup import escape


def is_blank(query: str | None) -> bool:
    """True for None, empty, or whitespace-only queries."""
    return not query or not query.strip()


def filter_entries(entries: Iterable[str], query: str | None) -> list[str]:
    """Return the entries whose text contains query, ignoring case.

    A blank query matches everything. Order is preserved and duplicates are
    kept. The query is matched as typed (not trimmed).
    """
    if is_blank(query):
        return list(entries)

    needle = query.casefold()
    return [entry for entry in entries if needle in entry.casefold()]


def clamp_page_index(index: int, count: int) -> int:
    """Clamp a requested page index into [0, count - 1]."""
    if count <= 0:
        return 0
    return max(0, min(index, count - 1))


def _casefold_spans(text: str, needle: str) -> list[tuple[int, int]]:
    """Spans of text whose casefolded form contains needle.

    Folding can change length ("ß" folds to "ss"), so each folded character
    remembers the original character it came from and a match covers every
    original character it touches.
    """
    owners: list[int] = []
    folded_parts: list[str] = []
    for index, char in enumerate(text):
        folded_char = char.casefold()
        folded_parts.append(folded_char)
        owners.extend([index] * len(folded_char))
    folded = "".join(folded_parts)

    spans: list[tuple[int, int]] = []
    start = folded.find(needle)
    while start != -1:
        end = start + len(needle)
        first, last = owners[start], owners[end - 1] + 1
        if spans and first < spans[-1][1]:
            spans[-1] = (spans[-1][0], max(last, spans[-1][1]))
        else:
            spans.append((first, last))
        start = folded.find(needle, end)
    return spans


def highlight_matches(text: str, query: str | None) -> str:
    """Wrap occurrences of query in text with Rich bold markup ([bold]...[/bold]).

    For use with Textual Static/Label widgets that support Rich markup. The
    rest of the text is escaped so entries containing brackets render as-is.
    Matching folds case the same way filter_entries does, so every listed
    entry has at least one highlighted span.

    Args:
        text: Raw entry text
        query: The text to emphasize (case-insensitive matching)

    Returns:
        Text with Rich bold markup applied
    """
    if is_blank(query):
        return escape(text)

    parts: list[str] = []
    last = 0
    for start, end in _casefold_spans(text, query.casefold()):
        parts.append(escape(text[last:start]))
        parts.append(f"[bold]{escape(text[start:end])}[/bold]")
        last = end
    parts.append(escape(text[last:]))
    return "".join(parts)


def indicator_flags(page_index: int, count: int) -> tuple[bool, ...]:
    """One flag per page, True for the active page."""
    return tuple(i == page_index for i in range(count))

