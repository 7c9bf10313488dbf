"""In-memory value store."""


class MemoryStore:
    """Non-durable store; values last for the lifetime of the object.

    Args:
        initial: Optional values to seed the store with.
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str, fallback: str) -> str:
        return self._values.get(key) or fallback

    def set(self, key: str, value: str) -> None:
        self._values[key] = value
