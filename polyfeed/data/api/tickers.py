"""Reference tickers endpoint definition and adapter.

GET /v2/reference/tickers/
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import ProviderError
from ..models import Ticker
from ..runtime.rest import ResponseAdapter, RestEndpointSpec
from .response import unwrap


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    q: dict[str, Any] = {}
    if params.get("page"):
        q["page"] = int(params["page"])
    if params.get("per_page"):
        q["perpage"] = int(params["per_page"])
    return q


SPEC = RestEndpointSpec(
    id="tickers",
    build_path=lambda _params: "/v2/reference/tickers/",
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    """Adapter for parsing the tickers response."""

    def parse(self, response: Any, params: dict[str, Any]) -> list[Ticker]:
        try:
            # Live v2 responses use "tickers"; older clients read a "ticker" key.
            return [Ticker.model_validate(row) for row in unwrap(response, "tickers")]
        except PydanticValidationError as exc:
            raise ProviderError(f"malformed ticker: {exc}") from exc
