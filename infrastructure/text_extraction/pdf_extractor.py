"""PDF extractor built on pypdf."""
from __future__ import annotations

from io import BytesIO
from pathlib import Path

from pypdf import PdfReader

from domain.errors import UnsupportedDocumentError
from domain.interfaces import TextExtractor


class PdfExtractor(TextExtractor):
    """Concatenates the text layer of every page.

    ``source`` is either the raw file content or a path to a PDF on disk.
    """

    def extract(self, source: bytes | str) -> str:
        if isinstance(source, bytes):
            return _collect_pdf_text(PdfReader(BytesIO(source)))
        path = Path(source)
        if not path.is_file():
            raise UnsupportedDocumentError(f"PDF file not found: {source}")
        return _collect_pdf_text(PdfReader(str(path)))


def _collect_pdf_text(reader: PdfReader) -> str:
    parts = [page.extract_text() or "" for page in reader.pages]
    return "\n".join(part for part in parts if part).strip()


__all__ = ["PdfExtractor"]
