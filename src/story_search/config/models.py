"""Pydantic configuration models for story search components."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from story_search.query.controller import DEFAULT_QUERY, DEFAULT_QUERY_KEY
from story_search.search.hn import HN_API_ENDPOINT

# ============================================================
# Searcher Configs
# ============================================================


class HNSearcherConfig(BaseModel):
    """Configuration for HNSearcher."""

    type: Literal["hn"] = "hn"
    endpoint: str = HN_API_ENDPOINT
    timeout: float | None = None

    model_config = {"frozen": True}


# ============================================================
# Store Configs
# ============================================================


class JsonFileStoreConfig(BaseModel):
    """Configuration for JsonFileStore."""

    type: Literal["json"] = "json"
    path: str = ".story_search/state.json"

    model_config = {"frozen": True}


class MemoryStoreConfig(BaseModel):
    """Non-durable store (nothing survives a restart)."""

    type: Literal["memory"] = "memory"

    model_config = {"frozen": True}


StoreConfig = Annotated[
    JsonFileStoreConfig | MemoryStoreConfig,
    Field(discriminator="type"),
]


# ============================================================
# Query Config
# ============================================================


class QueryConfig(BaseModel):
    """Configuration for the query commit controller."""

    key: str = DEFAULT_QUERY_KEY
    default_query: str = DEFAULT_QUERY

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for JSON session logging."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class StorySearchConfig(BaseModel):
    """Root configuration for story search."""

    search: HNSearcherConfig = Field(default_factory=HNSearcherConfig)
    store: StoreConfig = Field(default_factory=JsonFileStoreConfig)
    query: QueryConfig = Field(default_factory=QueryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
