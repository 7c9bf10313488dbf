"""Factory functions to create components from configuration."""

from pathlib import Path

from story_search.app import SearchApp
from story_search.config.models import (
    HNSearcherConfig,
    JsonFileStoreConfig,
    MemoryStoreConfig,
    StoreConfig,
    StorySearchConfig,
)
from story_search.fetch.orchestrator import FetchOrchestrator
from story_search.query.controller import QueryController
from story_search.search.base import StorySearcher
from story_search.search.hn import HNSearcher
from story_search.session_logger import SessionLogger
from story_search.state.container import StateContainer
from story_search.store.base import ValueStore
from story_search.store.json_file import JsonFileStore
from story_search.store.memory import MemoryStore


def create_store(config: StoreConfig) -> ValueStore:
    """Create a value store from config."""
    if isinstance(config, JsonFileStoreConfig):
        return JsonFileStore(Path(config.path))
    if isinstance(config, MemoryStoreConfig):
        return MemoryStore()
    msg = f"Unknown store config type: {type(config)}"
    raise ValueError(msg)


def create_searcher(config: HNSearcherConfig) -> StorySearcher:
    """Create a story searcher from config."""
    if isinstance(config, HNSearcherConfig):
        return HNSearcher(timeout=config.timeout)
    msg = f"Unknown searcher config type: {type(config)}"
    raise ValueError(msg)


def create_app(
    config: StorySearchConfig,
    *,
    store: ValueStore | None = None,
    searcher: StorySearcher | None = None,
    session_logger: SessionLogger | None = None,
) -> SearchApp:
    """Assemble a SearchApp; ``store`` and ``searcher`` override the config."""
    controller = QueryController(
        store if store is not None else create_store(config.store),
        endpoint=config.search.endpoint,
        key=config.query.key,
        default_query=config.query.default_query,
    )
    container = StateContainer(session_logger=session_logger)
    orchestrator = FetchOrchestrator(
        searcher if searcher is not None else create_searcher(config.search),
        container,
    )
    return SearchApp(controller, container, orchestrator)


def create_from_config(
    config: StorySearchConfig,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> tuple[SearchApp, SessionLogger | None]:
    """Create a complete app from root config.

    Args:
        config: Root configuration.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.

    Returns:
        Tuple of (app, session_logger).
        session_logger is None if logging is disabled.
    """
    log_enabled = log_override if log_override is not None else config.logging.enabled
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)

    session_logger: SessionLogger | None = None
    if log_enabled:
        session_logger = SessionLogger(log_dir=log_dir, enabled=True)

    app = create_app(config, session_logger=session_logger)
    return (app, session_logger)
