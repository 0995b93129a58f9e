"""Word tokenizer shared by corpus ingestion and vectorisation."""
from __future__ import annotations

import re

from domain.interfaces import Tokenizer

_TERM_PATTERN = re.compile(r"[^\W_]+")
_WHITESPACE_PATTERN = re.compile(r"\s+")


def tokenize(text: str) -> list[str]:
    """Return lower-cased runs of letters and digits."""
    if not text:
        return []
    return _TERM_PATTERN.findall(text.lower())


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to a single space and trim."""
    return _WHITESPACE_PATTERN.sub(" ", text or "").strip()


class WordTokenizer(Tokenizer):
    """Case-insensitive alphanumeric tokenizer."""

    def tokenize(self, text: str) -> list[str]:
        return tokenize(text)


__all__ = ["WordTokenizer", "normalize_whitespace", "tokenize"]
