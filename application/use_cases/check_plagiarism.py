"""Use case that checks a text against web-search results."""
from __future__ import annotations

import logging

from application.services.highlighter import Highlighter
from application.services.tokenizer import normalize_whitespace
from application.services.vectorizer import Vectorizer
from application.use_cases.score_against_corpus import score_against_corpus
from domain.entities import PlagiarismMatch, PlagiarismReport
from domain.errors import InvalidInputError
from domain.interfaces import CorpusStore, SearchClient

logger = logging.getLogger(__name__)


def check_plagiarism(
    text: str,
    *,
    search_client: SearchClient,
    corpus_store: CorpusStore,
    vectorizer: Vectorizer,
    highlighter: Highlighter,
) -> PlagiarismReport:
    """Score ``text`` against the titles and snippets returned for it by the search service.

    The reported percentage is the best snippet similarity.
    """

    normalized = normalize_whitespace(text)
    if not normalized:
        raise InvalidInputError("No valid content to check for plagiarism")

    hits = list(search_client.search(normalized))
    logger.info("Search returned %d hits for a %d character text", len(hits), len(normalized))

    comparisons: list[str] = []
    for hit in hits:
        comparisons.append(hit.title)
        comparisons.append(hit.snippet or "")

    report = score_against_corpus(
        normalized,
        comparisons,
        corpus_store=corpus_store,
        vectorizer=vectorizer,
        highlighter=highlighter,
    )

    matches: list[PlagiarismMatch] = []
    for position, hit in enumerate(hits):
        title_result = report.results[2 * position]
        snippet_result = report.results[2 * position + 1]
        matches.append(
            PlagiarismMatch(
                title=hit.title,
                snippet=hit.snippet or "",
                link=hit.link,
                title_similarity=title_result.score,
                snippet_similarity=snippet_result.score,
                highlighted_title=title_result.highlighted,
                highlighted_snippet=snippet_result.highlighted if hit.snippet else None,
            )
        )

    percentage = max((match.snippet_similarity for match in matches), default=0.0)
    return PlagiarismReport(
        checked_text=normalized,
        plagiarism_percentage=round(percentage, 2),
        matches=matches,
    )


__all__ = ["check_plagiarism"]
