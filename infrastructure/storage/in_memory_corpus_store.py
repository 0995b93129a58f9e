"""In-memory, append-only corpus with document-frequency bookkeeping."""
from __future__ import annotations

import logging
import math
import threading
from collections import Counter
from typing import Sequence

from domain.entities import Document
from domain.errors import CorpusCapacityError
from domain.interfaces import CorpusStore, Tokenizer

logger = logging.getLogger(__name__)


class InMemoryCorpusStore(CorpusStore):
    """Keeps every ingested document for the lifetime of the process.

    Documents are never evicted. ``max_documents`` bounds growth by refusing
    new documents once reached; ``None`` means unlimited.
    """

    def __init__(self, tokenizer: Tokenizer, max_documents: int | None = None) -> None:
        if max_documents is not None and max_documents < 0:
            raise ValueError("max_documents must be non-negative")
        self._tokenizer = tokenizer
        self._max_documents = max_documents
        self._documents: list[Document] = []
        self._document_frequency: Counter[str] = Counter()
        self.lock = threading.RLock()

    @property
    def max_documents(self) -> int | None:
        return self._max_documents

    def add_document(self, text: str) -> int:
        return self.add_documents([text])[0]

    def add_documents(self, texts: Sequence[str]) -> list[int]:
        """Append all ``texts`` or, if they would exceed the capacity, none of them."""
        texts = [text or "" for text in texts]
        if not texts:
            return []
        with self.lock:
            start = len(self._documents)
            if self._max_documents is not None and start + len(texts) > self._max_documents:
                raise CorpusCapacityError(
                    f"Corpus is full: {start} of {self._max_documents} documents stored, "
                    f"{len(texts)} more requested"
                )
            for offset, text in enumerate(texts):
                terms = Counter(self._tokenizer.tokenize(text))
                self._documents.append(Document(index=start + offset, text=text, terms=terms))
                self._document_frequency.update(terms.keys())
        logger.debug("Added documents %d..%d", start, start + len(texts) - 1)
        return list(range(start, start + len(texts)))

    def size(self) -> int:
        return len(self._documents)

    def get(self, index: int) -> Document:
        if index < 0 or index >= len(self._documents):
            raise IndexError(f"No document at index {index}")
        return self._documents[index]

    def documents(self) -> list[Document]:
        return list(self._documents)

    def document_frequency(self, term: str) -> int:
        return self._document_frequency.get(term, 0)

    def idf(self, term: str) -> float:
        # 1 + ln(N / (1 + df)); df <= N keeps this positive.
        df = self.document_frequency(term)
        size = len(self._documents)
        if df == 0 or size == 0:
            return 0.0
        return 1.0 + math.log(size / (1 + df))

    def weight(self, term: str, index: int) -> float:
        tf = self.get(index).term_frequency(term)
        if tf == 0:
            return 0.0
        return tf * self.idf(term)


__all__ = ["InMemoryCorpusStore"]
