"""Configuration module for story search."""

from story_search.config.factory import (
    create_app,
    create_from_config,
    create_searcher,
    create_store,
)
from story_search.config.loader import get_default_config_path, load_config
from story_search.config.models import (
    HNSearcherConfig,
    JsonFileStoreConfig,
    LoggingConfig,
    MemoryStoreConfig,
    QueryConfig,
    StoreConfig,
    StorySearchConfig,
)

__all__ = [
    "HNSearcherConfig",
    "JsonFileStoreConfig",
    "LoggingConfig",
    "MemoryStoreConfig",
    "QueryConfig",
    "StoreConfig",
    "StorySearchConfig",
    "create_app",
    "create_from_config",
    "create_searcher",
    "create_store",
    "get_default_config_path",
    "load_config",
]
