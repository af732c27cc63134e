"""Markup helpers that issue a token and embed it in a page."""

from __future__ import annotations

import json
from html import escape

from formguard.application.token_store import TokenStore


def hidden_input(
    store: TokenStore,
    context: str = "",
    time_to_live: int = -1,
    max_retained: int | None = None,
) -> str:
    """Return a hidden ``<input>`` carrying a fresh token for ``context``."""
    token = store.issue(context, time_to_live, max_retained)
    field = escape(store.input_name)
    return f'<input type="hidden" name="{field}" id="{field}" value="{escape(token.value)}"/>'


def javascript(
    store: TokenStore,
    context: str = "",
    name: str = "",
    declaration: str = "var",
    time_to_live: int = -1,
    max_retained: int | None = None,
) -> str:
    """Return a JavaScript statement declaring ``name`` as a fresh token."""
    token = store.issue(context, time_to_live, max_retained)
    variable = name or store.input_name
    return f"{declaration} {variable} = {json.dumps(token.value)};"


def script(
    store: TokenStore,
    context: str = "",
    name: str = "",
    declaration: str = "var",
    time_to_live: int = -1,
    max_retained: int | None = None,
) -> str:
    statement = javascript(store, context, name, declaration, time_to_live, max_retained)
    return f'<script type="text/javascript">{statement};</script>'


def token_string(
    store: TokenStore,
    context: str = "",
    time_to_live: int = -1,
    max_retained: int | None = None,
) -> str:
    return store.issue(context, time_to_live, max_retained).value


__all__ = ["hidden_input", "javascript", "script", "token_string"]
