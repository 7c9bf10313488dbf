"""Story search: a reducer-driven search client for the Hacker News index."""

from story_search.app import SearchApp
from story_search.config import StorySearchConfig, create_from_config, load_config
from story_search.data import (
    FetchFailure,
    FetchInit,
    FetchSuccess,
    RemoveStory,
    StoriesState,
    Story,
)
from story_search.fetch import FetchOrchestrator
from story_search.query import QueryController
from story_search.search import HNSearcher, StorySearcher
from story_search.session_logger import SessionLogger
from story_search.state import StateContainer, filter_stories, stories_reducer
from story_search.store import JsonFileStore, MemoryStore, ValueStore

__all__ = [
    # Models
    "Story",
    "StoriesState",
    # Events
    "FetchFailure",
    "FetchInit",
    "FetchSuccess",
    "RemoveStory",
    # Protocols
    "StorySearcher",
    "ValueStore",
    # Stores
    "JsonFileStore",
    "MemoryStore",
    # Searchers
    "HNSearcher",
    # State
    "StateContainer",
    "filter_stories",
    "stories_reducer",
    # Orchestration
    "FetchOrchestrator",
    "QueryController",
    "SearchApp",
    "SessionLogger",
    # Config
    "StorySearchConfig",
    "create_from_config",
    "load_config",
]
