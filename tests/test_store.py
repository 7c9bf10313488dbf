"""Tests for the persisted value stores."""

import json
import logging
from pathlib import Path

import pytest

from story_search.store import JsonFileStore, MemoryStore


class TestMemoryStore:
    """Tests for MemoryStore."""

    def test_get_returns_fallback_when_absent(self) -> None:
        store = MemoryStore()
        assert store.get("search", "React") == "React"

    def test_set_then_get(self) -> None:
        store = MemoryStore()
        store.set("search", "Redux")
        assert store.get("search", "React") == "Redux"

    def test_empty_value_reads_as_fallback(self) -> None:
        store = MemoryStore({"search": ""})
        assert store.get("search", "React") == "React"


class TestJsonFileStore:
    """Tests for JsonFileStore."""

    def test_get_returns_fallback_when_file_missing(self, tmp_path: Path) -> None:
        store = JsonFileStore(tmp_path / "state.json")
        assert store.get("search", "React") == "React"

    @pytest.mark.parametrize("value", ["Redux", "hello world", "ünïcode"])
    def test_set_is_visible_immediately(self, tmp_path: Path, value: str) -> None:
        store = JsonFileStore(tmp_path / "state.json")
        store.set("search", value)
        assert store.get("search", "React") == value

    def test_value_survives_restart(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "state.json"
        JsonFileStore(path).set("search", "Redux")

        assert path.exists()
        assert json.loads(path.read_text(encoding="utf-8")) == {"search": "Redux"}
        assert JsonFileStore(path).get("search", "React") == "Redux"

    def test_set_keeps_other_keys(self, tmp_path: Path) -> None:
        path = tmp_path / "state.json"
        store = JsonFileStore(path)
        store.set("search", "Redux")
        store.set("other", "value")
        assert JsonFileStore(path).get("search", "React") == "Redux"

    def test_corrupt_file_treated_as_empty(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        path = tmp_path / "state.json"
        path.write_text("{not json", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            store = JsonFileStore(path)

        assert store.get("search", "React") == "React"
        assert "unreadable" in caplog.text

    def test_non_object_file_treated_as_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "state.json"
        path.write_text('["Redux"]', encoding="utf-8")
        assert JsonFileStore(path).get("search", "React") == "React"

    def test_write_failure_is_swallowed(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        store = JsonFileStore(blocker / "state.json")

        with caplog.at_level(logging.WARNING):
            store.set("search", "Redux")

        # In-memory value stays authoritative for the session
        assert store.get("search", "React") == "Redux"
        assert "Could not persist" in caplog.text

    def test_unencodable_value_is_swallowed(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A lone surrogate (undecodable stdin byte) cannot be written as UTF-8."""
        path = tmp_path / "state.json"
        store = JsonFileStore(path)

        with caplog.at_level(logging.WARNING):
            store.set("search", "caf\udce9")

        assert store.get("search", "React") == "caf\udce9"
        assert "Could not persist" in caplog.text
        assert list(tmp_path.iterdir()) == []

    def test_failed_write_keeps_previous_file(self, tmp_path: Path) -> None:
        path = tmp_path / "state.json"
        store = JsonFileStore(path)
        store.set("search", "Redux")

        store.set("search", "caf\udce9")
        store.set("search", "Vue")

        assert JsonFileStore(path).get("search", "React") == "Vue"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["state.json"]

    def test_unusable_location_degrades_to_fallback(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        path = tmp_path / ("x" * 300) / "state.json"

        with caplog.at_level(logging.WARNING):
            store = JsonFileStore(path)
            store.set("search", "Redux")

        assert store.get("search", "React") == "Redux"
        assert JsonFileStore(path).get("other", "React") == "React"
        assert "Could not persist" in caplog.text

    def test_missing_file_logs_nothing(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING):
            JsonFileStore(tmp_path / "state.json")
        assert caplog.text == ""
