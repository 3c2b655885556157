"""Historical aggregates endpoint definition and adapter.

GET /v2/aggs/ticker/<symbol>/range/<multiplier>/<span>/<start>/<end>
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ..core.enums import TimeSpan
from ..core.exceptions import ProviderError
from ..models import Bar
from ..runtime.rest import ResponseAdapter, RestEndpointSpec
from ..utils.time import format_date
from .response import unwrap


@dataclass(frozen=True)
class AggregateRequest:
    """Request for aggregated bars of one ticker.

    The range covers whole UTC dates from ``start_time`` up to
    ``end_time``; the service treats ``end_time`` as exclusive.
    """

    symbol: str
    time_span: TimeSpan
    multiplier: int
    start_time: datetime
    end_time: datetime

    def __post_init__(self) -> None:
        if not self.symbol or not self.symbol.strip():
            raise ValueError("Symbol must be a non-empty string")
        if not 0 < self.multiplier < 256:
            raise ValueError("multiplier must be between 1 and 255")
        if self.end_time < self.start_time:
            raise ValueError("end_time must not be before start_time")

    def to_params(self) -> dict[str, Any]:
        return {
            "symbol": self.symbol.strip().upper(),
            "time_span": TimeSpan(self.time_span),
            "multiplier": self.multiplier,
            "start_time": self.start_time,
            "end_time": self.end_time,
        }


def build_path(params: dict[str, Any]) -> str:
    return (
        f"/v2/aggs/ticker/{params['symbol']}/range/{params['multiplier']}"
        f"/{params['time_span'].value}"
        f"/{format_date(params['start_time'])}/{format_date(params['end_time'])}"
    )


SPEC = RestEndpointSpec(id="aggregates", build_path=build_path)


class Adapter(ResponseAdapter):
    """Adapter for parsing the aggregates response into bars."""

    def parse(self, response: Any, params: dict[str, Any]) -> list[Bar]:
        try:
            return [Bar.model_validate(row) for row in unwrap(response, "results")]
        except PydanticValidationError as exc:
            raise ProviderError(f"malformed aggregate for {params['symbol']}: {exc}") from exc
