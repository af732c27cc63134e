"""Anti-forgery token value object."""

from __future__ import annotations

import hmac
import secrets
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from formguard.errors import InvalidHashSizeError

DEFAULT_HASH_SIZE = 64


def require_hash_size(hash_size: int) -> int:
    """Return ``hash_size`` if it is a positive even integer, raise otherwise."""
    if isinstance(hash_size, bool) or not isinstance(hash_size, int):
        raise InvalidHashSizeError(f"hash_size must be an integer, got {hash_size!r}")
    if hash_size < 2 or hash_size % 2:
        raise InvalidHashSizeError(f"hash_size must be a positive even integer, got {hash_size}")
    return hash_size


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class Token:
    """One issued credential bound to a context.

    ``expires_at`` of ``None`` means the token never expires by time.
    """

    value: str
    context: str = ""
    expires_at: datetime | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ValueError("value must be a non-empty string")
        if not isinstance(self.context, str):
            raise ValueError("context must be a string")
        if self.expires_at is not None and self.expires_at.tzinfo is None:
            raise ValueError("expires_at must be timezone-aware")

    @classmethod
    def create(
        cls,
        context: str = "",
        time_to_live: int = 0,
        hash_size: int = DEFAULT_HASH_SIZE,
        *,
        now: datetime | None = None,
    ) -> Token:
        """Generate a fresh token.

        ``hash_size`` hex characters are drawn from :mod:`secrets`; a
        non-positive ``time_to_live`` yields a token that never expires.
        """
        size = require_hash_size(hash_size)
        value = secrets.token_bytes(size // 2).hex()
        expires_at = None
        if time_to_live > 0:
            expires_at = (now or _utcnow()) + timedelta(seconds=time_to_live)
        return cls(value=value, context=context, expires_at=expires_at)

    def is_expired(self, now: datetime | None = None) -> bool:
        if self.expires_at is None:
            return False
        return self.expires_at <= (now or _utcnow())

    def matches_context(self, context: str = "") -> bool:
        return self.context == context

    def verify(self, candidate: str, context: str = "", now: datetime | None = None) -> bool:
        """Return ``True`` when ``candidate`` is this token's value for ``context``.

        The value comparison runs in constant time and is performed even
        when the context or expiry check has already failed.
        """
        if not isinstance(candidate, str):
            return False
        same_value = hmac.compare_digest(candidate.encode("utf-8"), self.value.encode("utf-8"))
        in_context = self.matches_context(context)
        expired = self.is_expired(now)
        return same_value and in_context and not expired


__all__ = ["DEFAULT_HASH_SIZE", "Token", "require_hash_size"]
