"""Port describing inbound request parameters."""

from __future__ import annotations

from typing import Protocol


class RequestParamsPort(Protocol):
    """Read access to the form body and the query string of a request."""

    def post(self, name: str) -> str | None:
        """Return the form-body parameter ``name``, if present."""

    def query(self, name: str) -> str | None:
        """Return the query-string parameter ``name``, if present."""


__all__ = ["RequestParamsPort"]
