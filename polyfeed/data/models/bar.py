"""Historical aggregate bar returned by the REST API."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from .fields import MillisTimestamp


class Bar(BaseModel):
    """One aggregated time frame of a ticker."""

    timestamp: MillisTimestamp = Field(..., alias="t")
    # Reported in exponent form at times (e.g. 3.5003466e+07), hence float.
    volume: float = Field(..., alias="v", ge=0)
    open_price: Decimal = Field(..., alias="o")
    close_price: Decimal = Field(..., alias="c")
    high_price: Decimal = Field(..., alias="h")
    low_price: Decimal = Field(..., alias="l")
    volume_weighted_average_price: Decimal | None = Field(None, alias="vw")
    transactions: int | None = Field(None, alias="n")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")
