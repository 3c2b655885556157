"""Connection settings loaded from environment variables using Pydantic v2."""

from __future__ import annotations

from urllib.parse import urlparse

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://api.polygon.io"
DEFAULT_STREAM_URL = "wss://socket.polygon.io/stocks"


class ApiInfo(BaseSettings):
    """Endpoints and credential used to talk to the service.

    Values come from ``POLYGON_API_URL``, ``POLYGON_STREAM_URL`` and
    ``POLYGON_API_KEY`` (or a ``.env`` file) unless passed explicitly.
    """

    api_url: str = Field(default=DEFAULT_API_URL)
    stream_url: str = Field(default=DEFAULT_STREAM_URL)
    api_key: SecretStr

    model_config = SettingsConfigDict(
        env_prefix="POLYGON_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, value: str) -> str:
        if urlparse(value).scheme not in ("http", "https"):
            raise ValueError("POLYGON_API_URL must be an http(s) URL")
        return value.rstrip("/")

    @field_validator("stream_url")
    @classmethod
    def validate_stream_url(cls, value: str) -> str:
        if urlparse(value).scheme not in ("ws", "wss"):
            raise ValueError("POLYGON_STREAM_URL must be a ws(s) URL")
        return value

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("POLYGON_API_KEY must not be empty")
        return value
