from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from formguard.infrastructure.state.session_store import InMemorySessionStore


class FakeClock:
    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


class RecordingSession(InMemorySessionStore):
    """Session store that counts writes."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        super().__init__(initial)
        self.writes: list[tuple[str, str]] = []

    def set(self, key: str, value: str) -> None:
        self.writes.append((key, value))
        super().set(key, value)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2025, 10, 17, 12, tzinfo=UTC))


@pytest.fixture
def session() -> RecordingSession:
    return RecordingSession()
