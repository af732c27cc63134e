"""Token store configuration resolved from the environment."""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from formguard.domain.token import DEFAULT_HASH_SIZE, require_hash_size


class TokenStoreSettings(BaseSettings):
    """Construction parameters for :class:`formguard.TokenStore`."""

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
    )

    session_key: str = Field(default="csrf-lib", alias="FORMGUARD_SESSION_KEY", min_length=1)
    input_name: str = Field(default="key-awesome", alias="FORMGUARD_INPUT_NAME", min_length=1)
    default_time_to_live: int = Field(default=0, alias="FORMGUARD_DEFAULT_TTL", ge=0)
    hash_size: int = Field(default=DEFAULT_HASH_SIZE, alias="FORMGUARD_HASH_SIZE")
    max_retained: int = Field(default=5, alias="FORMGUARD_MAX_RETAINED")

    @field_validator("hash_size")
    @classmethod
    def _even_hash_size(cls, value: int) -> int:
        return require_hash_size(value)

    @classmethod
    def load(cls) -> TokenStoreSettings:
        instance = cls()
        logger = logging.getLogger("formguard.settings")
        logger.info("token store settings loaded: %r", instance)
        return instance


__all__ = ["TokenStoreSettings"]
