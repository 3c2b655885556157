"""REST endpoint definitions."""

from . import aggregates, tickers
from .aggregates import AggregateRequest
from .response import unwrap

__all__ = ["AggregateRequest", "aggregates", "tickers", "unwrap"]
