"""Hacker News search via the Algolia API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from story_search.data import Story

HN_API_ENDPOINT = "https://hn.algolia.com/api/v1/search?query="

logger = logging.getLogger(__name__)


class HNSearcher:
    """Fetch stories from the Hacker News Algolia search API.

    A single GET per call. Non-2xx responses raise ``httpx.HTTPStatusError``;
    a body without a ``hits`` list raises ``ValueError``.

    Args:
        timeout: Request timeout in seconds, or None for no timeout.
    """

    def __init__(self, *, timeout: float | None = None) -> None:
        self._timeout = timeout

    async def fetch(self, url: str) -> list[Story]:
        """Fetch and parse the stories at ``url``."""
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            response = await client.get(url)
            response.raise_for_status()
            data = response.json()

        hits = data.get("hits") if isinstance(data, dict) else None
        if not isinstance(hits, list):
            raise ValueError(f"Response from {url} has no 'hits' list")

        stories = [_parse_hit(hit) for hit in hits if isinstance(hit, dict) and "objectID" in hit]
        logger.info(f"Fetched {len(stories)} stories from {url}")
        return stories


def _parse_hit(hit: dict[str, Any]) -> Story:
    """Convert one Algolia hit into a Story."""
    return Story(
        story_id=str(hit["objectID"]),
        title=hit.get("title"),
        url=hit.get("url"),
        author=hit.get("author"),
        num_comments=hit.get("num_comments") or 0,
        points=hit.get("points") or 0,
    )
