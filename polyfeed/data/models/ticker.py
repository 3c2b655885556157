"""Ticker reference data model."""

from pydantic import BaseModel, ConfigDict, Field


class Ticker(BaseModel):
    """Reference information about a ticker.

    Only a subset of the fields the service reports is represented.
    """

    ticker: str = Field(..., min_length=1)
    name: str = ""
    market: str = ""
    locale: str = ""
    currency: str | None = None
    active: bool = True

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, extra="ignore")
