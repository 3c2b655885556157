"""Streaming aggregate data models.

Second and minute aggregates share one payload layout and differ only by
their ``ev`` tag (``A`` and ``AM``).
"""

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import EventKind
from .fields import MillisTimestamp


class Aggregate(BaseModel):
    """An aggregate tick for a stock."""

    symbol: str = Field(..., alias="sym", min_length=1)
    volume: int = Field(..., alias="v", ge=0)
    volume_weighted_average_price: Decimal = Field(..., alias="vw")
    open_price: Decimal = Field(..., alias="o")
    close_price: Decimal = Field(..., alias="c")
    high_price: Decimal = Field(..., alias="h")
    low_price: Decimal = Field(..., alias="l")
    start_timestamp: MillisTimestamp = Field(..., alias="s")
    end_timestamp: MillisTimestamp = Field(..., alias="e")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class SecondAggregate(Aggregate):
    """Per-second aggregate."""

    ev: Literal["A"] = "A"

    @property
    def kind(self) -> EventKind:
        return EventKind.SECOND_AGGREGATE


class MinuteAggregate(Aggregate):
    """Per-minute aggregate."""

    ev: Literal["AM"] = "AM"

    @property
    def kind(self) -> EventKind:
        return EventKind.MINUTE_AGGREGATE
