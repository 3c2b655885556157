"""High level client bundling the stream and the REST endpoints."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime

from ..api import aggregates, tickers
from ..api.aggregates import AggregateRequest
from ..core.config import ApiInfo
from ..core.enums import TimeSpan
from ..models import Bar, Subscription, Ticker
from ..runtime.rest import RestRunner
from ..runtime.ws import EventStream, TransportConfig, open_event_stream
from ..utils.http import HTTPClient

logger = logging.getLogger(__name__)


class Client:
    """Entry point for both the real-time stream and historical data.

    Example:
        >>> async with Client.from_env() as client:
        ...     async with await client.stream([Subscription.trades("MSFT")]) as events:
        ...         async for event in events:
        ...             print(event.symbol, event.kind)
    """

    def __init__(
        self,
        api_info: ApiInfo,
        *,
        transport_config: TransportConfig | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.api_info = api_info
        self._transport_config = transport_config
        self._http = HTTPClient(
            base_url=api_info.api_url,
            timeout=timeout,
            default_params={"apiKey": api_info.api_key.get_secret_value()},
        )
        self._runner = RestRunner(self._http)

    @classmethod
    def from_env(cls, **kwargs) -> Client:
        """Create a client configured from ``POLYGON_*`` environment variables."""
        return cls(ApiInfo(), **kwargs)

    async def stream(self, subscriptions: Iterable[Subscription]) -> EventStream:
        """Open a streaming session for ``subscriptions``.

        The returned stream owns its connection; close it (or use it as an
        async context manager) when done.
        """
        return await open_event_stream(
            self.api_info, subscriptions, config=self._transport_config
        )

    async def get_aggregates(self, request: AggregateRequest) -> list[Bar]:
        """Fetch aggregated bars for one ticker."""
        return await self._runner.run(
            spec=aggregates.SPEC, adapter=aggregates.Adapter(), params=request.to_params()
        )

    async def get_bars(
        self,
        symbol: str,
        time_span: TimeSpan,
        start_time: datetime,
        end_time: datetime,
        multiplier: int = 1,
    ) -> list[Bar]:
        """Shortcut for ``get_aggregates`` with keyword arguments."""
        request = AggregateRequest(
            symbol=symbol,
            time_span=time_span,
            multiplier=multiplier,
            start_time=start_time,
            end_time=end_time,
        )
        return await self.get_aggregates(request)

    async def get_tickers(self, page: int | None = None, per_page: int | None = None) -> list[Ticker]:
        """Fetch reference information about tickers."""
        return await self._runner.run(
            spec=tickers.SPEC,
            adapter=tickers.Adapter(),
            params={"page": page, "per_page": per_page},
        )

    async def close(self) -> None:
        """Close the HTTP session."""
        await self._http.close()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
