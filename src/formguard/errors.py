"""Exceptions raised by the token lifecycle engine."""

from __future__ import annotations


class FormguardError(Exception):
    """Base class for token store failures."""


class InvalidHashSizeError(FormguardError, ValueError):
    """Raised when a credential length is not a positive even integer."""


class CorruptSessionStateError(FormguardError):
    """Raised when a serialized token list cannot be decoded."""


__all__ = [
    "CorruptSessionStateError",
    "FormguardError",
    "InvalidHashSizeError",
]
