"""Typed errors raised by the PlagCheck core and its adapters."""
from __future__ import annotations


class PlagCheckError(Exception):
    """Base class for all PlagCheck errors."""


class InvalidInputError(PlagCheckError, ValueError):
    """The submitted text is empty after whitespace normalisation."""


class VectorLengthMismatchError(PlagCheckError, ValueError):
    """Two weighted vectors computed at different corpus sizes were compared strictly."""

    def __init__(self, left_size: int, right_size: int) -> None:
        super().__init__(f"Cannot compare vectors computed at corpus sizes {left_size} and {right_size}")
        self.left_size = left_size
        self.right_size = right_size


class CorpusCapacityError(PlagCheckError, RuntimeError):
    """The corpus store reached its configured document limit."""


class UnsupportedDocumentError(PlagCheckError, ValueError):
    """No extractor can turn the uploaded document into text."""


class SearchServiceError(PlagCheckError, RuntimeError):
    """The web-search service is unavailable or misconfigured."""


class ConfigurationError(PlagCheckError, ValueError):
    """An environment setting could not be parsed."""


__all__ = [
    "PlagCheckError",
    "InvalidInputError",
    "VectorLengthMismatchError",
    "CorpusCapacityError",
    "UnsupportedDocumentError",
    "SearchServiceError",
    "ConfigurationError",
]
