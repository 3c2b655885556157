"""Core enums, exceptions and settings."""

from .config import DEFAULT_API_URL, DEFAULT_STREAM_URL, ApiInfo
from .enums import Action, EventKind, StatusCode, TimeSpan
from .exceptions import (
    DataError,
    DecodeError,
    NotFoundError,
    ProtocolError,
    ProviderError,
    TransportError,
)

__all__ = [
    # Settings
    "ApiInfo",
    "DEFAULT_API_URL",
    "DEFAULT_STREAM_URL",
    # Enums
    "Action",
    "EventKind",
    "StatusCode",
    "TimeSpan",
    # Exceptions
    "DataError",
    "DecodeError",
    "NotFoundError",
    "ProtocolError",
    "ProviderError",
    "TransportError",
]
