"""Separation of typed query text from the committed fetch trigger."""

from __future__ import annotations

import logging

from story_search.store.base import ValueStore

logger = logging.getLogger(__name__)

DEFAULT_QUERY_KEY = "search"
DEFAULT_QUERY = "React"


class QueryController:
    """Track the live query and commit it to a fetch trigger on submit.

    Typing persists the live query immediately, so a restart resumes with the
    last typed text even if it was never submitted. Only ``on_submit`` changes
    the trigger.

    Args:
        store: Persisted value store for the live query.
        endpoint: Request prefix the query is appended to.
        key: Storage key for the live query.
        default_query: Query used when nothing is stored.
    """

    def __init__(
        self,
        store: ValueStore,
        *,
        endpoint: str,
        key: str = DEFAULT_QUERY_KEY,
        default_query: str = DEFAULT_QUERY,
    ) -> None:
        self._store = store
        self._endpoint = endpoint
        self._key = key
        self._query = store.get(key, default_query)
        self._trigger = f"{endpoint}{self._query}"

    @property
    def query(self) -> str:
        """Live, uncommitted query text."""
        return self._query

    @property
    def trigger(self) -> str:
        """Request target for the last committed query."""
        return self._trigger

    @property
    def can_submit(self) -> bool:
        """Whether the submit control should be enabled."""
        return bool(self._query)

    def on_input(self, text: str) -> None:
        """Update the live query and persist it."""
        self._query = text
        self._store.set(self._key, text)

    def on_submit(self) -> str:
        """Commit the live query and return the new trigger."""
        self._trigger = f"{self._endpoint}{self._query}"
        logger.debug(f"Committed trigger {self._trigger}")
        return self._trigger
