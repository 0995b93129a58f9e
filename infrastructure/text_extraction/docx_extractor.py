"""Word (.docx) extractor built on python-docx."""
from __future__ import annotations

from io import BytesIO
from pathlib import Path

from docx import Document as open_docx

from domain.errors import UnsupportedDocumentError
from domain.interfaces import TextExtractor


class DocxExtractor(TextExtractor):
    """Reads body paragraphs, then table cells, one per line.

    ``source`` is either the raw file content or a path to a .docx on disk.
    """

    def extract(self, source: bytes | str) -> str:
        if isinstance(source, bytes):
            return _docx_text(open_docx(BytesIO(source)))
        path = Path(source)
        if not path.is_file():
            raise UnsupportedDocumentError(f"Word file not found: {source}")
        return _docx_text(open_docx(str(path)))


def _docx_text(document) -> str:
    lines = [paragraph.text for paragraph in document.paragraphs]
    lines.extend(cell.text for table in document.tables for row in table.rows for cell in row.cells)
    return "\n".join(line for line in lines if line.strip()).strip()


__all__ = ["DocxExtractor"]
