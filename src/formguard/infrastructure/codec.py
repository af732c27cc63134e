"""JSON codec for the token list kept in the session."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from formguard.domain.token import Token
from formguard.errors import CorruptSessionStateError


class TokenRecord(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)

    value: str
    context: str
    expires_at: datetime | None

    @classmethod
    def from_domain(cls, token: Token) -> TokenRecord:
        return cls(value=token.value, context=token.context, expires_at=token.expires_at)

    def to_domain(self) -> Token:
        return Token(value=self.value, context=self.context, expires_at=self.expires_at)


_RECORDS = TypeAdapter(list[TokenRecord])


class TokenListCodec:
    """Encodes tokens as a JSON array of ``value``/``context``/``expires_at`` objects."""

    def encode(self, tokens: Sequence[Token]) -> str:
        records = [TokenRecord.from_domain(token) for token in tokens]
        return _RECORDS.dump_json(records).decode("utf-8")

    def decode(self, payload: str) -> list[Token]:
        """Return the decoded tokens, oldest first.

        Raises :class:`CorruptSessionStateError` for anything that is not a
        well-formed token list.
        """
        if not isinstance(payload, (str, bytes, bytearray)):
            raise CorruptSessionStateError(f"expected serialized text, got {type(payload).__name__}")
        try:
            records = _RECORDS.validate_json(payload)
            return [record.to_domain() for record in records]
        except (ValidationError, ValueError) as exc:
            raise CorruptSessionStateError(f"invalid token list payload: {exc}") from exc


__all__ = ["TokenListCodec", "TokenRecord"]
