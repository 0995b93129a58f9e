"""Domain entities for the PlagCheck system."""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Sequence


@dataclass(frozen=True, slots=True)
class Document:
    """A text stored in the corpus at a fixed insertion-order index."""

    index: int
    text: str
    terms: Counter[str] = field(default_factory=Counter, compare=False, repr=False)

    def term_frequency(self, term: str) -> int:
        return self.terms.get(term, 0)


@dataclass(frozen=True, slots=True)
class WeightedTermVector:
    """Per-document weights of a text, tagged with the corpus size they were computed at."""

    values: tuple[float, ...]
    corpus_size: int

    def __post_init__(self) -> None:
        if len(self.values) != self.corpus_size:
            raise ValueError(
                f"Vector has {len(self.values)} entries but was tagged with corpus size {self.corpus_size}"
            )

    @classmethod
    def from_values(cls, values: Sequence[float]) -> "WeightedTermVector":
        return cls(values=tuple(float(value) for value in values), corpus_size=len(values))

    def __len__(self) -> int:
        return self.corpus_size

    def padded(self, length: int) -> tuple[float, ...]:
        """Return the values extended with zeros up to ``length``."""
        if length <= self.corpus_size:
            return self.values
        return self.values + (0.0,) * (length - self.corpus_size)


@dataclass(slots=True)
class ScoredText:
    """A comparison text with its similarity (0-100) and highlighted form."""

    text: str
    score: float
    highlighted: str


@dataclass(slots=True)
class ScoringReport:
    """Result of scoring a query against a batch of comparison texts."""

    max_score: float
    results: list[ScoredText] = field(default_factory=list)


@dataclass(slots=True)
class SearchHit:
    """A single web-search result used as comparison material."""

    title: str
    snippet: str = ""
    link: str | None = None


@dataclass(slots=True)
class PlagiarismMatch:
    """Similarity of the checked text against one search hit."""

    title: str
    snippet: str
    link: str | None
    title_similarity: float
    snippet_similarity: float
    highlighted_title: str
    highlighted_snippet: str | None


@dataclass(slots=True)
class PlagiarismReport:
    """Aggregated outcome of a plagiarism check."""

    checked_text: str
    plagiarism_percentage: float
    matches: list[PlagiarismMatch] = field(default_factory=list)


__all__ = [
    "Document",
    "WeightedTermVector",
    "ScoredText",
    "ScoringReport",
    "SearchHit",
    "PlagiarismMatch",
    "PlagiarismReport",
]
