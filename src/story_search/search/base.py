"""Story searcher protocol."""

from typing import Protocol

from story_search.data import Story


class StorySearcher(Protocol):
    """Interface for fetching stories from a fully-qualified request URL."""

    async def fetch(self, url: str) -> list[Story]:
        """Fetch the stories for ``url``.

        Args:
            url: Request target (endpoint plus committed query).

        Returns:
            Stories in server order.

        Raises:
            Exception: Any failure (HTTP status, transport, malformed body).
        """
        ...
