"""Extractor selection for uploaded documents."""
from __future__ import annotations

from pathlib import PurePath

from domain.errors import UnsupportedDocumentError
from domain.interfaces import TextExtractor
from infrastructure.text_extraction.docx_extractor import DocxExtractor
from infrastructure.text_extraction.pdf_extractor import PdfExtractor
from infrastructure.text_extraction.plain_text_extractor import PlainTextExtractor

_EXTENSION_EXTRACTORS: dict[str, type[TextExtractor]] = {
    ".pdf": PdfExtractor,
    ".docx": DocxExtractor,
    ".txt": PlainTextExtractor,
    ".md": PlainTextExtractor,
}


def select_extractor(filename: str | None = None, content_type: str | None = None) -> TextExtractor:
    """Pick an extractor by MIME type first, then by file extension."""

    mime = (content_type or "").split(";")[0].strip().lower()
    if mime == "application/pdf":
        return PdfExtractor()
    if "word" in mime:
        return DocxExtractor()
    if mime == "text/plain":
        return PlainTextExtractor()

    suffix = PurePath(filename or "").suffix.lower()
    try:
        return _EXTENSION_EXTRACTORS[suffix]()
    except KeyError as exc:
        raise UnsupportedDocumentError(
            f"Unsupported file type: {content_type or 'unknown'} ({filename or 'unnamed'})"
        ) from exc


__all__ = ["DocxExtractor", "PdfExtractor", "PlainTextExtractor", "select_extractor"]
