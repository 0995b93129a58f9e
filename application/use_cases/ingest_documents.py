"""Use case for ingesting documents into the corpus."""
from __future__ import annotations

from typing import Iterable

from domain.interfaces import CorpusStore, TextExtractor


def ingest_documents(texts: Iterable[str], *, corpus_store: CorpusStore) -> list[int]:
    """Append plain texts to the corpus and return their indices.

    Either the whole batch is stored or, when it does not fit, nothing is.
    """

    return corpus_store.add_documents(list(texts))


def ingest_sources(
    sources: Iterable[bytes | str],
    *,
    extractor: TextExtractor,
    corpus_store: CorpusStore,
) -> list[int]:
    """Extract text from each source and append it to the corpus."""

    texts = [extractor.extract(source) for source in sources]
    return ingest_documents(texts, corpus_store=corpus_store)


__all__ = ["ingest_documents", "ingest_sources"]
