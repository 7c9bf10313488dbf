"""Data models for story search."""

from story_search.data.models import (
    FetchFailure,
    FetchInit,
    FetchSuccess,
    RemoveStory,
    StoriesEvent,
    StoriesState,
    Story,
)

__all__ = [
    "FetchFailure",
    "FetchInit",
    "FetchSuccess",
    "RemoveStory",
    "StoriesEvent",
    "StoriesState",
    "Story",
]
