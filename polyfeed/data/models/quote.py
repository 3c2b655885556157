"""Quote data model."""

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import EventKind
from .fields import MillisTimestamp


class Quote(BaseModel):
    """Top of book quote for a stock as streamed under the ``Q`` tag."""

    ev: Literal["Q"] = "Q"
    symbol: str = Field(..., alias="sym", min_length=1)
    bid_exchange: int = Field(..., alias="bx")
    bid_price: Decimal = Field(..., alias="bp")
    bid_quantity: int = Field(..., alias="bs", ge=0)
    ask_exchange: int = Field(..., alias="ax")
    ask_price: Decimal = Field(..., alias="ap")
    ask_quantity: int = Field(..., alias="as", ge=0)
    timestamp: MillisTimestamp = Field(..., alias="t")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @property
    def kind(self) -> EventKind:
        return EventKind.QUOTE

    @property
    def spread(self) -> Decimal:
        """Ask price minus bid price."""
        return self.ask_price - self.bid_price
