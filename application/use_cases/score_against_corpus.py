"""Use case that scores a query against a batch of comparison texts."""
from __future__ import annotations

from typing import Sequence

from application.services.highlighter import Highlighter
from application.services.similarity import cosine_similarity
from application.services.tokenizer import normalize_whitespace
from application.services.vectorizer import Vectorizer
from domain.entities import ScoredText, ScoringReport
from domain.errors import InvalidInputError
from domain.interfaces import CorpusStore


def score_against_corpus(
    query_text: str,
    comparison_texts: Sequence[str],
    *,
    corpus_store: CorpusStore,
    vectorizer: Vectorizer,
    highlighter: Highlighter,
) -> ScoringReport:
    """Ingest the query and comparisons, then score every comparison against the query.

    All texts are added before any vector is computed so every vector in the
    batch shares the same corpus size. The store lock is held throughout.
    """

    normalized = normalize_whitespace(query_text)
    if not normalized:
        raise InvalidInputError("No valid content to check for plagiarism")

    comparisons = [text or "" for text in comparison_texts]
    with corpus_store.lock:
        corpus_store.add_documents([normalized, *comparisons])

        query_vector = vectorizer.vectorize(normalized)
        results = [
            ScoredText(
                text=text,
                score=cosine_similarity(query_vector, vectorizer.vectorize(text), strict=True) * 100,
                highlighted=highlighter.highlight(text, normalized),
            )
            for text in comparisons
        ]

    max_score = max((result.score for result in results), default=0.0)
    return ScoringReport(max_score=max_score, results=results)


__all__ = ["score_against_corpus"]
