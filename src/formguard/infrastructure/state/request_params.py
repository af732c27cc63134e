"""Request parameter adapter backed by plain mappings."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from formguard.application.ports.request_params import RequestParamsPort


class MappingRequestParams(RequestParamsPort):
    """Exposes a form body and a query string given as mappings.

    Non-string values (lists from multi-valued fields, uploads) count as absent.
    """

    def __init__(
        self,
        post: Mapping[str, Any] | None = None,
        query: Mapping[str, Any] | None = None,
    ) -> None:
        self._post = post if post is not None else {}
        self._query = query if query is not None else {}

    def post(self, name: str) -> str | None:
        return _text(self._post.get(name))

    def query(self, name: str) -> str | None:
        return _text(self._query.get(name))


def _text(value: Any) -> str | None:
    return value if isinstance(value, str) else None


__all__ = ["MappingRequestParams"]
