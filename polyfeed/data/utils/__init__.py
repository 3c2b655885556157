"""Utility functions."""

from .http import HTTPClient
from .time import EXCHANGE_TZ, format_date, from_millis, to_millis

__all__ = ["EXCHANGE_TZ", "HTTPClient", "format_date", "from_millis", "to_millis"]
