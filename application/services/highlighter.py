"""Literal, case-insensitive match highlighting."""
from __future__ import annotations

DEFAULT_OPEN_TAG = '<span style="background-color: yellow;">'
DEFAULT_CLOSE_TAG = "</span>"


def _find_matches(haystack: str, needle: str) -> list[tuple[int, int]]:
    """Return non-overlapping ``(start, end)`` spans of ``needle`` in ``haystack``."""
    folded_needle = needle.lower()
    folded_haystack = haystack.lower()
    spans: list[tuple[int, int]] = []

    if len(folded_haystack) == len(haystack) and len(folded_needle) == len(needle):
        start = folded_haystack.find(folded_needle)
        while start != -1:
            end = start + len(needle)
            spans.append((start, end))
            start = folded_haystack.find(folded_needle, end)
        return spans

    # Lower-casing changed a length; compare slice by slice on the original text.
    width = len(needle)
    position = 0
    while position + width <= len(haystack):
        if haystack[position : position + width].lower() == folded_needle:
            spans.append((position, position + width))
            position += width
        else:
            position += 1
    return spans


def highlight(
    haystack: str,
    needle: str,
    *,
    open_tag: str = DEFAULT_OPEN_TAG,
    close_tag: str = DEFAULT_CLOSE_TAG,
) -> str:
    """Wrap every occurrence of ``needle`` in ``haystack`` with the markers.

    Matching is literal and case-insensitive; the haystack keeps its original
    casing. An empty needle matches nothing.
    """
    if not needle or not haystack:
        return haystack
    spans = _find_matches(haystack, needle)
    if not spans:
        return haystack

    parts: list[str] = []
    cursor = 0
    for start, end in spans:
        parts.append(haystack[cursor:start])
        parts.append(f"{open_tag}{haystack[start:end]}{close_tag}")
        cursor = end
    parts.append(haystack[cursor:])
    return "".join(parts)


class Highlighter:
    """Highlights literal matches with configured markers."""

    def __init__(self, open_tag: str = DEFAULT_OPEN_TAG, close_tag: str = DEFAULT_CLOSE_TAG) -> None:
        self.open_tag = open_tag
        self.close_tag = close_tag

    def highlight(self, haystack: str, needle: str) -> str:
        return highlight(haystack, needle, open_tag=self.open_tag, close_tag=self.close_tag)


__all__ = ["DEFAULT_CLOSE_TAG", "DEFAULT_OPEN_TAG", "Highlighter", "highlight"]
