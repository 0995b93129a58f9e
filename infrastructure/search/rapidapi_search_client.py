"""Web-search client for the Google Search RapidAPI endpoint."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

import requests

from domain.entities import SearchHit
from domain.errors import SearchServiceError
from domain.interfaces import SearchClient

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RapidApiSearchConfig:
    api_key: str | None = None
    api_host: str = "google-search72.p.rapidapi.com"
    api_url: str = "https://google-search72.p.rapidapi.com/search"
    language: str = "en-US"
    num_results: int = 10
    timeout: float = 30.0


class RapidApiSearchClient(SearchClient):
    """Fetch titles and snippets for a query from RapidAPI's Google search."""

    def __init__(self, config: RapidApiSearchConfig, session: requests.Session | None = None) -> None:
        self._config = config
        self._session = session or requests.Session()

    def search(self, query: str) -> list[SearchHit]:
        api_key = self._config.api_key or os.getenv("RAPIDAPI_KEY")
        if not api_key:
            raise SearchServiceError("Missing RapidAPI key.")
        try:
            response = self._session.get(
                self._config.api_url,
                params={"q": query, "lr": self._config.language, "num": str(self._config.num_results)},
                headers={
                    "x-rapidapi-key": api_key,
                    "x-rapidapi-host": self._config.api_host,
                },
                timeout=self._config.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            raise SearchServiceError(f"Search request failed: {exc}") from exc

        items = (payload.get("items") or []) if isinstance(payload, dict) else []
        hits = [self._parse_item(item) for item in items if isinstance(item, dict)]
        logger.debug("RapidAPI returned %d items", len(hits))
        return hits

    @staticmethod
    def _parse_item(item: dict) -> SearchHit:
        return SearchHit(
            title=str(item.get("title") or ""),
            snippet=str(item.get("snippet") or ""),
            link=item.get("link"),
        )


__all__ = ["RapidApiSearchClient", "RapidApiSearchConfig"]
