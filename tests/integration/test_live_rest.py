"""Integration tests for the REST endpoints against the live service."""

import os
from datetime import UTC, datetime

import pytest

from polyfeed.data import Bar, TimeSpan

pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_POLYFEED_NETWORK_TESTS") != "1",
    reason="Requires network access and POLYGON_API_KEY",
)


class TestAggregatesLive:
    @pytest.mark.asyncio
    async def test_empty_range(self, client):
        bars = await client.get_bars(
            "VMW",
            TimeSpan.MINUTE,
            datetime(2017, 1, 1, tzinfo=UTC),
            datetime(2017, 1, 1, tzinfo=UTC),
            multiplier=5,
        )
        assert bars == []

    @pytest.mark.asyncio
    async def test_aapl_daily(self, client):
        bars = await client.get_bars(
            "AAPL",
            TimeSpan.DAY,
            datetime(2018, 2, 1, tzinfo=UTC),
            datetime(2018, 3, 1, tzinfo=UTC),
        )

        # 19 trading days; Presidents' Day fell on February 19th.
        assert len(bars) == 19
        assert all(isinstance(bar, Bar) for bar in bars)
        assert bars[0].timestamp.date() == datetime(2018, 2, 1).date()
        assert bars[-1].timestamp.date() == datetime(2018, 2, 28).date()


class TestTickersLive:
    @pytest.mark.asyncio
    async def test_first_page(self, client):
        tickers = await client.get_tickers(page=1, per_page=10)
        assert 0 < len(tickers) <= 10
        assert all(t.ticker for t in tickers)
