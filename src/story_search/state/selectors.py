"""Read-only views over the stories state."""

from __future__ import annotations

from collections.abc import Iterable

from story_search.data import Story


def filter_stories(stories: Iterable[Story], term: str) -> list[Story]:
    """Keep stories whose title contains ``term``, ignoring case.

    Stories without a title are never shown.
    """
    needle = term.lower()
    return [story for story in stories if story.title and needle in story.title.lower()]
