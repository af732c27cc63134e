"""In-memory implementation of the session store port."""

from __future__ import annotations

from threading import Lock

from formguard.application.ports.session_store import SessionStorePort


class InMemorySessionStore(SessionStorePort):
    """Stores session entries in memory for the lifetime of the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._entries: dict[str, str] = dict(initial or {})
        self._lock = Lock()

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._entries.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._entries[key] = value

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def snapshot(self) -> dict[str, str]:
        with self._lock:
            return dict(self._entries)


__all__ = ["InMemorySessionStore"]
