"""Shared fixtures for integration tests."""

import os

import pytest
import pytest_asyncio

from polyfeed.data import Client

# Skip all integration tests unless RUN_POLYFEED_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_POLYFEED_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_POLYFEED_NETWORK_TESTS=1 to run",
)


@pytest_asyncio.fixture
async def client():
    """Client configured from POLYGON_* environment variables."""
    async with Client.from_env() as client:
        yield client
