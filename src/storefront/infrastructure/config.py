"""Configuration for the storefront client.

Settings are read from environment variables prefixed with
``STOREFRONT_`` (or a local ``.env`` file) and validated on load.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Client settings.

    Attributes:
        API_BASE_URL: Base URL of the storefront REST backend
        REQUEST_TIMEOUT: Timeout for a single HTTP request, in seconds
        DEFAULT_CURRENCY: Currency assumed for prices the backend sends without one
        LOG_LEVEL: Logging level for the CLI
        LOG_JSON: Emit JSON log lines instead of human-readable ones
    """

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    API_BASE_URL: str = Field(
        default="http://localhost:3000",
        description="Base URL of the storefront REST backend",
    )
    REQUEST_TIMEOUT: float = Field(
        default=10.0,
        gt=0,
        description="Timeout for a single HTTP request in seconds",
    )
    DEFAULT_CURRENCY: str = Field(
        default="USD",
        description="Currency assumed for prices sent without one",
    )
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level",
    )
    LOG_JSON: bool = Field(
        default=False,
        description="Use JSON structured logging",
    )

    @field_validator("API_BASE_URL")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("API_BASE_URL must start with http:// or https://")
        return value.rstrip("/")

    @field_validator("DEFAULT_CURRENCY")
    @classmethod
    def validate_currency(cls, value: str) -> str:
        code = value.strip().upper()
        if len(code) != 3 or not code.isalpha():
            raise ValueError("DEFAULT_CURRENCY must be a three-letter code")
        return code


@lru_cache
def get_settings() -> Settings:
    return Settings()
