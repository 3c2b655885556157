"""Data models for market data types.

Architecture:
    Pydantic v2 models for everything decoded from the wire, plus the
    Subscription value type. All models are immutable (frozen=True).

Design Decisions:
    - Field aliases carry the service's terse wire names (``sym``, ``p``)
      while attributes use descriptive names
    - Decimal for prices, epoch milliseconds decoded to exchange-local
      datetimes
    - Unknown wire fields are ignored

Model Categories:
    - Stream events: Trade, Quote, SecondAggregate, MinuteAggregate
    - Control: Status
    - REST: Bar, Ticker
    - Requests: Subscription
"""

from .aggregate import Aggregate, MinuteAggregate, SecondAggregate
from .bar import Bar
from .events import EVENT_TYPES, Event, ProtocolMessage
from .quote import Quote
from .status import Status
from .subscription import ALL_SYMBOLS, Subscription
from .ticker import Ticker
from .trade import Trade

__all__ = [
    "ALL_SYMBOLS",
    "Aggregate",
    "Bar",
    "EVENT_TYPES",
    "Event",
    "MinuteAggregate",
    "ProtocolMessage",
    "Quote",
    "SecondAggregate",
    "Status",
    "Subscription",
    "Ticker",
    "Trade",
]
