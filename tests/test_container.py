"""Tests for StateContainer."""

from pathlib import Path

from story_search.data import FetchInit, FetchSuccess, RemoveStory, StoriesState, Story
from story_search.session_logger import SessionLogger
from story_search.state.container import StateContainer


def test_initial_state_is_empty() -> None:
    container = StateContainer()
    assert container.state == StoriesState(items=(), is_loading=False, is_error=False)


def test_dispatch_applies_reducer() -> None:
    container = StateContainer()
    result = container.dispatch(FetchInit())
    assert result.is_loading is True
    assert container.state is result


def test_listeners_notified_on_change() -> None:
    container = StateContainer()
    seen: list[StoriesState] = []
    container.subscribe(seen.append)

    container.dispatch(FetchInit())
    container.dispatch(FetchSuccess(payload=(Story(story_id="1", title="React"),)))

    assert len(seen) == 2
    assert seen[-1].items[0].story_id == "1"


def test_listeners_not_notified_without_change() -> None:
    container = StateContainer()
    seen: list[StoriesState] = []
    container.subscribe(seen.append)

    container.dispatch(RemoveStory(story_id="missing"))
    container.dispatch("bogus")

    assert seen == []


def test_unsubscribe_stops_notifications() -> None:
    container = StateContainer()
    seen: list[StoriesState] = []
    unsubscribe = container.subscribe(seen.append)

    unsubscribe()
    unsubscribe()  # second call is harmless
    container.dispatch(FetchInit())

    assert seen == []


def test_dispatch_records_to_session_logger(tmp_path: Path) -> None:
    session_logger = SessionLogger(log_dir=tmp_path, enabled=True)
    session_logger.start_session("React")
    container = StateContainer(session_logger=session_logger)

    container.dispatch(FetchInit())
    container.dispatch(FetchSuccess(payload=(Story(story_id="1"),)))
    path = session_logger.finish_session("React", container.state)

    assert path is not None
    assert '"FetchSuccess"' in path.read_text()
