"""Abstract interfaces for the PlagCheck system."""
from __future__ import annotations

from abc import ABC, abstractmethod
from threading import RLock
from typing import Sequence

from domain.entities import Document, SearchHit


class TextExtractor(ABC):
    """Extracts text from user provided sources (files, uploads, etc.)."""

    @abstractmethod
    def extract(self, source: bytes | str) -> str:
        """Return the textual representation of a source."""


class Tokenizer(ABC):
    """Splits raw text into comparable terms."""

    @abstractmethod
    def tokenize(self, text: str) -> list[str]:
        """Return the normalised terms of ``text`` in order of appearance."""


class CorpusStore(ABC):
    """Append-only collection of documents with document-frequency statistics."""

    lock: RLock

    @abstractmethod
    def add_document(self, text: str) -> int:
        """Append a document and return its index."""

    @abstractmethod
    def add_documents(self, texts: Sequence[str]) -> list[int]:
        """Append a batch atomically and return the indices, in order."""

    @abstractmethod
    def size(self) -> int:
        """Return the number of stored documents."""

    @abstractmethod
    def get(self, index: int) -> Document:
        """Return the document stored at ``index``."""

    @abstractmethod
    def documents(self) -> list[Document]:
        """Return all stored documents in insertion order."""

    @abstractmethod
    def document_frequency(self, term: str) -> int:
        """Return how many documents contain ``term``."""

    @abstractmethod
    def idf(self, term: str) -> float:
        """Return the inverse document frequency of ``term``."""

    @abstractmethod
    def weight(self, term: str, index: int) -> float:
        """Return the weight of ``term`` with respect to document ``index``."""


class SearchClient(ABC):
    """Fetches comparison material for a text from a search service."""

    @abstractmethod
    def search(self, query: str) -> Sequence[SearchHit]:
        """Return search hits for ``query``."""


__all__ = [
    "TextExtractor",
    "Tokenizer",
    "CorpusStore",
    "SearchClient",
]
