"""Pure state transitions for the fetched story list."""

from __future__ import annotations

import dataclasses
import logging

from story_search.data import (
    FetchFailure,
    FetchInit,
    FetchSuccess,
    RemoveStory,
    StoriesState,
)

logger = logging.getLogger(__name__)


def stories_reducer(state: StoriesState, event: object) -> StoriesState:
    """Compute the next state for ``event``.

    Items survive FetchInit and FetchFailure so stale results stay visible
    while loading or after an error. Unrecognized events return ``state``
    unchanged.

    Args:
        state: Current state.
        event: One of FetchInit, FetchSuccess, FetchFailure or RemoveStory.

    Returns:
        The next state.
    """
    if isinstance(event, FetchInit):
        return dataclasses.replace(state, is_loading=True, is_error=False)
    if isinstance(event, FetchSuccess):
        return StoriesState(items=tuple(event.payload), is_loading=False, is_error=False)
    if isinstance(event, FetchFailure):
        return dataclasses.replace(state, is_loading=False, is_error=True)
    if isinstance(event, RemoveStory):
        return dataclasses.replace(
            state,
            items=tuple(story for story in state.items if story.story_id != event.story_id),
        )
    logger.debug(f"Ignoring unknown event: {event!r}")
    return state
