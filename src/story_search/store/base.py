"""Persisted value store protocol."""

from typing import Protocol


class ValueStore(Protocol):
    """Interface for a key/value slot that survives process restarts."""

    def get(self, key: str, fallback: str) -> str:
        """Return the stored value for ``key``, or ``fallback`` if absent.

        Args:
            key: Storage key.
            fallback: Value returned when nothing (or an empty string) is stored.

        Returns:
            The stored value or ``fallback``.
        """
        ...

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``.

        The new value must be visible to the next ``get`` immediately. Failures
        to persist are not raised to the caller.
        """
        ...
