"""JSON file backed value store."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class JsonFileStore:
    """Persist string values in a single JSON object file.

    The file is read once on construction. Every ``set`` updates the in-memory
    copy first, then rewrites the file through a temporary file and
    ``os.replace``. Read and write failures are logged and swallowed; the
    in-memory values stay authoritative for the session.

    Args:
        path: Location of the JSON file. Parent directories are created on write.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._values: dict[str, str] = self._load()

    @property
    def path(self) -> Path:
        """Location of the backing file."""
        return self._path

    def get(self, key: str, fallback: str) -> str:
        return self._values.get(key) or fallback

    def set(self, key: str, value: str) -> None:
        self._values[key] = value
        try:
            self._write()
        except (OSError, ValueError) as e:
            logger.warning(f"Could not persist {key!r} to {self._path}: {e}")

    def _load(self) -> dict[str, str]:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable store {self._path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring store {self._path}: expected a JSON object")
            return {}
        return {str(k): str(v) for k, v in data.items() if v is not None}

    def _write(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            tmp_path.write_text(
                json.dumps(self._values, ensure_ascii=False, indent=2), encoding="utf-8"
            )
            os.replace(tmp_path, self._path)
        except (OSError, ValueError):
            tmp_path.unlink(missing_ok=True)
            raise
