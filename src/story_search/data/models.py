"""Core data models for story search."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Story:
    """A single story returned by the search index.

    Identity is ``story_id``; the remaining fields are display data.
    """

    story_id: str
    title: str | None = None
    url: str | None = None
    author: str | None = None
    num_comments: int = 0
    points: int = 0


@dataclass(frozen=True)
class StoriesState:
    """Fetched stories plus the request lifecycle flags."""

    items: tuple[Story, ...] = ()
    is_loading: bool = False
    is_error: bool = False


# ============================================================
# Events
# ============================================================


@dataclass(frozen=True)
class FetchInit:
    """A request for the current trigger has started."""


@dataclass(frozen=True)
class FetchSuccess:
    """A request resolved with the given stories, in server order."""

    payload: tuple[Story, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class FetchFailure:
    """A request failed (HTTP status, transport or malformed body)."""


@dataclass(frozen=True)
class RemoveStory:
    """The user dismissed a story."""

    story_id: str


StoriesEvent = FetchInit | FetchSuccess | FetchFailure | RemoveStory
