"""Edge-driven fetching of stories for the committed trigger."""

from __future__ import annotations

import asyncio
import logging

from story_search.data import FetchFailure, FetchInit, FetchSuccess
from story_search.search.base import StorySearcher
from story_search.state.container import StateContainer

logger = logging.getLogger(__name__)


class FetchOrchestrator:
    """Issue one request per distinct fetch trigger and drive the state lifecycle.

    ``sync`` compares the trigger with the last one it saw; only a change
    starts a request. Requests are never deduplicated or cancelled, so when
    triggers change faster than requests resolve, whichever request completes
    last wins, regardless of which trigger is newer.

    Args:
        searcher: Performs the network request.
        container: Owner of the stories state.
    """

    def __init__(self, searcher: StorySearcher, container: StateContainer) -> None:
        self._searcher = searcher
        self._container = container
        self._previous_trigger: str | None = None
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def previous_trigger(self) -> str | None:
        """The last trigger that started a request, or None before the first."""
        return self._previous_trigger

    @property
    def pending(self) -> int:
        """Number of requests still in flight."""
        return len(self._tasks)

    def sync(self, trigger: str) -> asyncio.Task[None] | None:
        """Start a request if ``trigger`` differs from the previous one.

        Must be called from a running event loop.

        Args:
            trigger: Current fetch trigger (request URL).

        Returns:
            The spawned task, or None if the trigger did not change.
        """
        if trigger == self._previous_trigger:
            return None
        self._previous_trigger = trigger

        self._container.dispatch(FetchInit())
        task = asyncio.get_running_loop().create_task(self._fetch(trigger))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def wait(self) -> None:
        """Wait until every request in flight has settled."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    async def _fetch(self, trigger: str) -> None:
        try:
            stories = await self._searcher.fetch(trigger)
        except Exception as e:
            logger.warning(f"Fetching {trigger} failed: {e!r}")
            self._container.dispatch(FetchFailure())
            return
        self._container.dispatch(FetchSuccess(payload=tuple(stories)))
