"""Conversions between exchange timestamps and datetimes.

The service reports times as UNIX epoch milliseconds. Decoded values are
timezone aware and expressed in the exchange's local zone.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo

EXCHANGE_TZ = ZoneInfo("America/New_York")

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_MILLISECOND = timedelta(milliseconds=1)


def from_millis(millis: int | float, tz: ZoneInfo = EXCHANGE_TZ) -> datetime:
    """Convert epoch milliseconds into an aware datetime in ``tz``."""
    return (_EPOCH + timedelta(milliseconds=int(millis))).astimezone(tz)


def to_millis(value: datetime) -> int:
    """Convert a datetime back into epoch milliseconds.

    Naive datetimes are interpreted as being in the exchange timezone.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=EXCHANGE_TZ)
    return (value - _EPOCH) // _MILLISECOND


def format_date(value: datetime) -> str:
    """Format the UTC calendar date of ``value`` as ``YYYY-MM-DD``."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).strftime("%Y-%m-%d")
