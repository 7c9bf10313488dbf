"""Session logger for recording dispatched state events to JSON files."""

import dataclasses
import uuid
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from story_search.data import StoriesState


class EventRecord(BaseModel):
    """Record of a single dispatched event and the state it produced."""

    event: str
    payload: dict[str, Any] | None = None
    item_count: int = 0
    is_loading: bool = False
    is_error: bool = False
    timestamp: str = ""


class SessionRecord(BaseModel):
    """Record of a complete interactive session."""

    session_id: str
    initial_query: str
    started_at: str
    completed_at: str | None = None
    events: list[EventRecord] = []
    final_query: str | None = None
    final_item_count: int = 0


def _serialize_event(event: object) -> dict[str, Any] | None:
    """Serialize an event's fields, summarising story payloads by id."""
    if not dataclasses.is_dataclass(event) or isinstance(event, type):
        return None
    data: dict[str, Any] = {}
    for f in dataclasses.fields(event):
        value = getattr(event, f.name)
        if f.name == "payload":
            data["story_ids"] = [story.story_id for story in value]
        else:
            data[f.name] = value
    return data or None


class SessionLogger:
    """Accumulates event records and writes a JSON log file per session.

    When ``enabled=False``, all methods are no-ops.

    Args:
        log_dir: Directory to write JSON log files.
        enabled: If False, all methods become no-ops.
    """

    def __init__(self, log_dir: Path, *, enabled: bool = True) -> None:
        self._log_dir = log_dir
        self._enabled = enabled
        self._record: SessionRecord | None = None
        self._last_log_path: Path | None = None

    @property
    def enabled(self) -> bool:
        """Whether logging is active."""
        return self._enabled

    @property
    def last_log_path(self) -> Path | None:
        """Path to the last written log file, or None."""
        return self._last_log_path

    def start_session(self, initial_query: str) -> None:
        """Initialize a new session record.

        Args:
            initial_query: Query the session started with.
        """
        if not self._enabled:
            return

        self._record = SessionRecord(
            session_id=str(uuid.uuid4()),
            initial_query=initial_query,
            started_at=datetime.now(tz=UTC).isoformat(),
        )

    def log_event(self, event: object, state: StoriesState) -> None:
        """Append an event record to the current session."""
        if not self._enabled or self._record is None:
            return

        self._record.events.append(
            EventRecord(
                event=type(event).__name__,
                payload=_serialize_event(event),
                item_count=len(state.items),
                is_loading=state.is_loading,
                is_error=state.is_error,
                timestamp=datetime.now(tz=UTC).isoformat(),
            )
        )

    def finish_session(self, final_query: str, state: StoriesState) -> Path | None:
        """Write the session record to a JSON file.

        Args:
            final_query: Live query when the session ended.
            state: Final stories state.

        Returns:
            Path to the written JSON file, or None if logging is disabled.
        """
        if not self._enabled or self._record is None:
            return None

        self._record.completed_at = datetime.now(tz=UTC).isoformat()
        self._record.final_query = final_query
        self._record.final_item_count = len(state.items)

        self._log_dir.mkdir(parents=True, exist_ok=True)

        # session_2026-02-12T14-30-00.json (colons -> dashes, no microseconds/tz)
        ts = self._record.started_at.replace(":", "-")
        ts = ts.split(".")[0].split("+")[0]
        filepath = self._log_dir / f"session_{ts}.json"

        filepath.write_text(self._record.model_dump_json(indent=2))
        self._last_log_path = filepath
        return filepath
