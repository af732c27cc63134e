"""Session-bound store that issues, prunes and consumes anti-forgery tokens."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from formguard.application.ports.request_params import RequestParamsPort
from formguard.application.ports.session_store import SessionStorePort
from formguard.config.settings import TokenStoreSettings
from formguard.domain.token import DEFAULT_HASH_SIZE, Token, require_hash_size
from formguard.errors import CorruptSessionStateError
from formguard.infrastructure.codec import TokenListCodec

logger = logging.getLogger("formguard.token_store")


def _utcnow() -> datetime:
    return datetime.now(UTC)


class TokenStore:
    """Owns the ordered token list stored in the session under ``name``.

    The list is loaded once on construction and written back to the session
    after every operation that changes it. One instance serves one request;
    the session store is the durable copy.
    """

    def __init__(
        self,
        session: SessionStorePort,
        *,
        name: str = "csrf-lib",
        input_name: str = "key-awesome",
        default_time_to_live: int = 0,
        hash_size: int = DEFAULT_HASH_SIZE,
        max_retained: int = 5,
        request_params: RequestParamsPort | None = None,
        clock: Callable[[], datetime] | None = None,
        codec: TokenListCodec | None = None,
    ) -> None:
        if default_time_to_live < 0:
            raise ValueError("default_time_to_live must be non-negative")
        self._session = session
        self._name = name
        self._input_name = input_name
        self._default_time_to_live = default_time_to_live
        self._hash_size = require_hash_size(hash_size)
        self._max_retained = max_retained
        self._request_params = request_params
        self._clock = clock or _utcnow
        self._codec = codec or TokenListCodec()
        self._tokens: list[Token] = []
        self.load()

    @classmethod
    def from_settings(
        cls,
        session: SessionStorePort,
        settings: TokenStoreSettings,
        *,
        request_params: RequestParamsPort | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> TokenStore:
        return cls(
            session,
            name=settings.session_key,
            input_name=settings.input_name,
            default_time_to_live=settings.default_time_to_live,
            hash_size=settings.hash_size,
            max_retained=settings.max_retained,
            request_params=request_params,
            clock=clock,
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def input_name(self) -> str:
        return self._input_name

    @property
    def default_time_to_live(self) -> int:
        return self._default_time_to_live

    @property
    def hash_size(self) -> int:
        return self._hash_size

    @property
    def max_retained(self) -> int:
        return self._max_retained

    @property
    def tokens(self) -> tuple[Token, ...]:
        """Snapshot of the live tokens, oldest first."""
        return tuple(self._tokens)

    # ------------------------------------------------------------------
    # public API

    def issue(
        self,
        context: str = "",
        time_to_live: int = -1,
        max_retained: int | None = None,
    ) -> Token:
        """Create a token for ``context`` and keep only the newest ``max_retained``.

        A negative ``time_to_live`` and a missing ``max_retained`` fall back to
        the store defaults. The session is written exactly once.
        """
        if max_retained is None:
            max_retained = self._max_retained
        if time_to_live < 0:
            time_to_live = self._default_time_to_live
        token = Token.create(context, time_to_live, self._hash_size, now=self._clock())
        self._tokens.append(token)
        if self.prune(context, max_retained) == 0:
            self.persist()
        logger.debug(
            "issued token",
            extra={
                "data": {
                    "store": self._name,
                    "context": context,
                    "time_to_live": time_to_live,
                    "live_tokens": len(self._tokens),
                }
            },
        )
        return token

    def list_values(self, context: str = "", limit: int = -1) -> list[str]:
        """Return the values of ``context`` tokens, newest first.

        Collection stops after ``limit`` values when ``limit`` is non-negative.
        """
        values: list[str] = []
        if limit == 0:
            return values
        for token in reversed(self._tokens):
            if not token.matches_context(context):
                continue
            values.append(token.value)
            if 0 < limit <= len(values):
                break
        return values

    def prune(self, context: str = "", keep: int = 0) -> int:
        """Delete all but the newest ``keep`` tokens of ``context``.

        ``keep <= 0`` deletes every matching token. Returns the number deleted
        and writes the session only when that number is positive.
        """
        remaining = max(keep, 0)
        kept: list[Token] = []
        deleted = 0
        for token in reversed(self._tokens):
            if token.matches_context(context):
                if remaining > 0:
                    remaining -= 1
                else:
                    deleted += 1
                    continue
            kept.append(token)
        if deleted > 0:
            kept.reverse()
            self._tokens = kept
            self.persist()
            logger.debug(
                "pruned tokens",
                extra={"data": {"store": self._name, "context": context, "deleted": deleted}},
            )
        return deleted

    def validate(self, context: str = "", candidate: str | None = None) -> bool:
        """Consume the token matching ``candidate`` in ``context``.

        Without an explicit ``candidate`` the value is read from the request,
        form body first, then the query string. Returns ``False`` when nothing
        matches; a matching token is removed so it cannot be replayed.
        """
        if candidate is None:
            candidate = self._candidate_from_request()
            if candidate is None:
                return False

        now = self._clock()
        for index in range(len(self._tokens) - 1, -1, -1):
            if self._tokens[index].verify(candidate, context, now):
                del self._tokens[index]
                self.persist()
                logger.debug(
                    "consumed token",
                    extra={"data": {"store": self._name, "context": context}},
                )
                return True
        logger.debug(
            "token validation failed",
            extra={"data": {"store": self._name, "context": context}},
        )
        return False

    validate_and_consume = validate

    def clear(self) -> int:
        """Delete every token in every context."""
        deleted = len(self._tokens)
        if deleted > 0:
            self._tokens = []
            self.persist()
        return deleted

    def load(self) -> None:
        """Replace the live tokens with the list held by the session.

        The stored list is walked from newest to oldest and cut at the first
        expired token; that token and everything older are dropped.
        """
        self._tokens = []
        payload = self._session.get(self._name)
        if payload is None:
            return
        try:
            stored = self._codec.decode(payload)
        except CorruptSessionStateError as exc:
            logger.warning(
                "discarding unreadable token list",
                extra={"data": {"store": self._name, "error": str(exc)}},
            )
            return

        now = self._clock()
        cut = 0
        for index in range(len(stored) - 1, -1, -1):
            if stored[index].is_expired(now):
                cut = index + 1
                break
        self._tokens = stored[cut:]
        if cut:
            logger.debug(
                "dropped expired tokens on load",
                extra={"data": {"store": self._name, "dropped": cut}},
            )
            self.persist()

    def persist(self) -> None:
        """Write the full token list to the session under ``name``."""
        self._session.set(self._name, self._codec.encode(self._tokens))

    # ------------------------------------------------------------------
    # helpers

    def _candidate_from_request(self) -> str | None:
        if self._request_params is None:
            return None
        value = self._request_params.post(self._input_name)
        if value is None:
            value = self._request_params.query(self._input_name)
        return value


__all__ = ["TokenStore"]
