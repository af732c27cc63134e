"""Port describing the session-scoped key-value store."""

from __future__ import annotations

from typing import Protocol


class SessionStorePort(Protocol):
    """String-keyed, string-valued map scoped to the current session."""

    def get(self, key: str) -> str | None:
        """Return the value stored under ``key``, if any."""

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any prior value."""


__all__ = ["SessionStorePort"]
