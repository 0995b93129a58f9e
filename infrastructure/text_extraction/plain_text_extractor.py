"""Extractor for text/plain uploads."""
from __future__ import annotations

from domain.interfaces import TextExtractor


class PlainTextExtractor(TextExtractor):
    """Decodes UTF-8 uploads, dropping a leading byte-order mark.

    Strings are already text and are returned as given.
    """

    encoding = "utf-8-sig"

    def extract(self, source: bytes | str) -> str:
        if isinstance(source, str):
            return source
        return source.decode(self.encoding, errors="replace")


__all__ = ["PlainTextExtractor"]
