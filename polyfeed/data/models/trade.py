"""Trade data model."""

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import EventKind
from .fields import MillisTimestamp


class Trade(BaseModel):
    """A trade of a stock as streamed under the ``T`` tag."""

    ev: Literal["T"] = "T"
    symbol: str = Field(..., alias="sym", min_length=1)
    exchange: int = Field(..., alias="x")
    price: Decimal = Field(..., alias="p")
    quantity: int = Field(..., alias="s", ge=0)
    timestamp: MillisTimestamp = Field(..., alias="t")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @property
    def kind(self) -> EventKind:
        return EventKind.TRADE
