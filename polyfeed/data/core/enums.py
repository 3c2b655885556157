"""Core enumerations shared by the streaming and REST layers.

Key Types:
    - EventKind: Stream event kinds and their wire codes
    - StatusCode: Status codes carried by control messages
    - Action: Request actions sent during the handshake
    - TimeSpan: Aggregation spans for historical aggregates
"""

from enum import Enum


class EventKind(str, Enum):
    """Kinds of market events, valued by their wire code.

    The same code is used as the `ev` tag of inbound messages and as the
    prefix of subscription parameters (e.g. ``T.MSFT``).
    """

    TRADE = "T"
    QUOTE = "Q"
    SECOND_AGGREGATE = "A"
    MINUTE_AGGREGATE = "AM"

    @classmethod
    def from_code(cls, code: str) -> "EventKind":
        """Look up a kind by wire code, raising ValueError for unknown codes."""
        try:
            return cls(code)
        except ValueError:
            raise ValueError(f"Unknown event kind code: {code!r}") from None


class StatusCode(str, Enum):
    """Status indication for an operation."""

    CONNECTED = "connected"
    DISCONNECTED = "disconnected"
    AUTH_SUCCESS = "auth_success"
    AUTH_FAILURE = "auth_failed"
    SUCCESS = "success"


class Action(str, Enum):
    """Actions understood by the streaming service."""

    AUTHENTICATE = "auth"
    SUBSCRIBE = "subscribe"


class TimeSpan(str, Enum):
    """Time span of a historical aggregate."""

    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"
