"""Dependency wiring for the PlagCheck application."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable

from application.services.highlighter import DEFAULT_CLOSE_TAG, DEFAULT_OPEN_TAG, Highlighter
from application.services.tokenizer import WordTokenizer
from application.services.vectorizer import Vectorizer
from domain.errors import ConfigurationError
from domain.interfaces import CorpusStore, SearchClient, Tokenizer
from infrastructure.search.rapidapi_search_client import RapidApiSearchClient, RapidApiSearchConfig
from infrastructure.storage.in_memory_corpus_store import InMemoryCorpusStore


@dataclass(slots=True)
class Container:
    """Simple container bundling the corpus and its collaborators."""

    tokenizer: Tokenizer
    corpus_store: CorpusStore
    vectorizer: Vectorizer
    highlighter: Highlighter
    search_client: SearchClient


@dataclass(slots=True)
class ContainerConfig:
    """Configuration for the corpus, highlighting and the search service."""

    max_documents: int | None = None
    highlight_open_tag: str = DEFAULT_OPEN_TAG
    highlight_close_tag: str = DEFAULT_CLOSE_TAG
    search_api_key: str | None = None
    search_api_host: str = "google-search72.p.rapidapi.com"
    search_api_url: str = "https://google-search72.p.rapidapi.com/search"
    search_results: int = 10
    search_language: str = "en-US"
    search_timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "ContainerConfig":
        defaults = cls()
        return cls(
            max_documents=_env_number("PLAGCHECK_MAX_DOCUMENTS", int, None),
            highlight_open_tag=os.getenv("PLAGCHECK_HIGHLIGHT_OPEN", defaults.highlight_open_tag),
            highlight_close_tag=os.getenv("PLAGCHECK_HIGHLIGHT_CLOSE", defaults.highlight_close_tag),
            search_api_key=os.getenv("PLAGCHECK_SEARCH_API_KEY") or os.getenv("RAPIDAPI_KEY"),
            search_api_host=os.getenv("PLAGCHECK_SEARCH_API_HOST", defaults.search_api_host),
            search_api_url=os.getenv("PLAGCHECK_SEARCH_API_URL", defaults.search_api_url),
            search_results=_env_number("PLAGCHECK_SEARCH_RESULTS", int, defaults.search_results),
            search_language=os.getenv("PLAGCHECK_SEARCH_LANGUAGE", defaults.search_language),
            search_timeout=_env_number("PLAGCHECK_SEARCH_TIMEOUT", float, defaults.search_timeout),
        )


def _env_number(name: str, parse: Callable[[str], float], default: float | None) -> float | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = parse(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc
    if value < 0:
        raise ConfigurationError(f"{name} must not be negative, got {raw!r}")
    return value


def build_default_container(
    config: ContainerConfig | None = None,
    *,
    search_client: SearchClient | None = None,
) -> Container:
    """Instantiate the default in-memory stack."""

    cfg = config or ContainerConfig()
    tokenizer = WordTokenizer()
    corpus_store = InMemoryCorpusStore(tokenizer, max_documents=cfg.max_documents)
    vectorizer = Vectorizer(corpus_store, tokenizer)
    highlighter = Highlighter(open_tag=cfg.highlight_open_tag, close_tag=cfg.highlight_close_tag)
    if search_client is None:
        search_client = RapidApiSearchClient(
            RapidApiSearchConfig(
                api_key=cfg.search_api_key,
                api_host=cfg.search_api_host,
                api_url=cfg.search_api_url,
                language=cfg.search_language,
                num_results=cfg.search_results,
                timeout=cfg.search_timeout,
            )
        )

    return Container(
        tokenizer=tokenizer,
        corpus_store=corpus_store,
        vectorizer=vectorizer,
        highlighter=highlighter,
        search_client=search_client,
    )


__all__ = ["Container", "ContainerConfig", "build_default_container"]
