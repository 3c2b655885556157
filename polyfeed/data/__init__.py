"""Polyfeed Data - real-time stream and REST client for Polygon market data."""

from .api import AggregateRequest
from .clients import Client
from .core import (
    ApiInfo,
    DataError,
    DecodeError,
    EventKind,
    NotFoundError,
    ProtocolError,
    ProviderError,
    StatusCode,
    TimeSpan,
    TransportError,
)
from .models import (
    ALL_SYMBOLS,
    Aggregate,
    Bar,
    Event,
    MinuteAggregate,
    Quote,
    SecondAggregate,
    Subscription,
    Ticker,
    Trade,
)
from .runtime.ws import EventStream, TransportConfig, open_event_stream

__version__ = "0.1.0"

__all__ = [
    # Settings
    "ApiInfo",
    "TransportConfig",
    # Enums
    "EventKind",
    "StatusCode",
    "TimeSpan",
    # Streaming
    "EventStream",
    "open_event_stream",
    # Clients
    "Client",
    "AggregateRequest",
    # Models
    "ALL_SYMBOLS",
    "Aggregate",
    "Bar",
    "Event",
    "MinuteAggregate",
    "Quote",
    "SecondAggregate",
    "Subscription",
    "Ticker",
    "Trade",
    # Exceptions
    "DataError",
    "DecodeError",
    "NotFoundError",
    "ProtocolError",
    "ProviderError",
    "TransportError",
]
