"""Presentation boundary: user intents in, state out."""

from __future__ import annotations

import logging
from collections.abc import Callable

from story_search.data import RemoveStory, StoriesState, Story
from story_search.fetch.orchestrator import FetchOrchestrator
from story_search.query.controller import QueryController
from story_search.state.container import StateContainer
from story_search.state.selectors import filter_stories

logger = logging.getLogger(__name__)


class SearchApp:
    """Wire the query controller, state container and fetch orchestrator.

    A renderer only needs ``state``, ``query`` (or ``visible_stories``) and
    the three intents ``on_query_input``, ``on_query_submit`` and
    ``on_remove``.

    Args:
        controller: Query commit controller.
        container: Owner of the stories state.
        orchestrator: Fetch orchestrator bound to ``container``.
    """

    def __init__(
        self,
        controller: QueryController,
        container: StateContainer,
        orchestrator: FetchOrchestrator,
    ) -> None:
        self._controller = controller
        self._container = container
        self._orchestrator = orchestrator

    @property
    def state(self) -> StoriesState:
        return self._container.state

    @property
    def query(self) -> str:
        return self._controller.query

    @property
    def trigger(self) -> str:
        return self._controller.trigger

    @property
    def can_submit(self) -> bool:
        return self._controller.can_submit

    @property
    def visible_stories(self) -> list[Story]:
        """Fetched stories filtered by the live query."""
        return filter_stories(self._container.state.items, self._controller.query)

    def subscribe(self, listener: Callable[[StoriesState], None]) -> Callable[[], None]:
        """Register a listener for state changes."""
        return self._container.subscribe(listener)

    def start(self) -> None:
        """Fetch stories for the initial trigger."""
        logger.info(f"Starting with query {self._controller.query!r}")
        self._orchestrator.sync(self._controller.trigger)

    def on_query_input(self, text: str) -> None:
        self._controller.on_input(text)

    def on_query_submit(self) -> None:
        trigger = self._controller.on_submit()
        if self._orchestrator.sync(trigger) is None:
            logger.debug(f"Trigger unchanged, not refetching: {trigger}")

    def on_remove(self, story_id: str) -> None:
        self._container.dispatch(RemoveStory(story_id=story_id))

    async def settle(self) -> None:
        """Wait for in-flight fetches to finish."""
        await self._orchestrator.wait()
