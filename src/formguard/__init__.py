"""Session-bound anti-forgery tokens scoped by context."""

from formguard.application.token_store import TokenStore
from formguard.config.settings import TokenStoreSettings
from formguard.domain.token import Token
from formguard.errors import CorruptSessionStateError, FormguardError, InvalidHashSizeError
from formguard.infrastructure.state.request_params import MappingRequestParams
from formguard.infrastructure.state.session_store import InMemorySessionStore

__all__ = [
    "CorruptSessionStateError",
    "FormguardError",
    "InMemorySessionStore",
    "InvalidHashSizeError",
    "MappingRequestParams",
    "Token",
    "TokenStore",
    "TokenStoreSettings",
]
