"""Turns arbitrary text into a weighted vector over the current corpus."""
from __future__ import annotations

from domain.entities import WeightedTermVector
from domain.interfaces import CorpusStore, Tokenizer


class Vectorizer:
    """Weights a text against every document's term statistics.

    Entry ``i`` of the result is the summed ``tf * idf`` weight of the text's
    distinct terms in document ``i``. This is not the vector of document
    ``i`` itself: it measures how much the text overlaps with what is
    distinctive about that document.
    """

    def __init__(self, corpus_store: CorpusStore, tokenizer: Tokenizer) -> None:
        self._corpus_store = corpus_store
        self._tokenizer = tokenizer

    def vectorize(self, text: str) -> WeightedTermVector:
        terms = sorted(set(self._tokenizer.tokenize(text)))
        with self._corpus_store.lock:
            size = self._corpus_store.size()
            idfs = {term: self._corpus_store.idf(term) for term in terms}
            values = []
            for document in self._corpus_store.documents():
                values.append(
                    float(sum(document.term_frequency(term) * idf for term, idf in idfs.items() if idf))
                )
        return WeightedTermVector(values=tuple(values), corpus_size=size)


__all__ = ["Vectorizer"]
