"""Single owner of the stories state."""

from __future__ import annotations

import logging
from collections.abc import Callable

from story_search.data import StoriesState
from story_search.session_logger import SessionLogger
from story_search.state.reducer import stories_reducer

logger = logging.getLogger(__name__)

Listener = Callable[[StoriesState], None]


class StateContainer:
    """Hold the current StoriesState and apply events through the reducer.

    All writes go through ``dispatch``. Listeners are notified after each
    dispatch that produced a different state.

    Args:
        initial: Starting state (defaults to empty items, both flags false).
        session_logger: Optional logger recording every dispatched event.
    """

    def __init__(
        self,
        initial: StoriesState | None = None,
        *,
        session_logger: SessionLogger | None = None,
    ) -> None:
        self._state = initial if initial is not None else StoriesState()
        self._listeners: list[Listener] = []
        self._session_logger = session_logger

    @property
    def state(self) -> StoriesState:
        """The current state."""
        return self._state

    def dispatch(self, event: object) -> StoriesState:
        """Apply ``event`` and return the resulting state."""
        previous = self._state
        self._state = stories_reducer(previous, event)
        logger.debug(
            f"{type(event).__name__}: {len(self._state.items)} items, "
            f"loading={self._state.is_loading}, error={self._state.is_error}"
        )
        if self._session_logger is not None:
            self._session_logger.log_event(event, self._state)
        if self._state != previous:
            for listener in list(self._listeners):
                listener(self._state)
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
