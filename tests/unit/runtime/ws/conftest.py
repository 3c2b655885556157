"""Shared fixtures for streaming tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest
from wire_samples import AUTH_RESP, CONNECTED_MSG, SUB_RESP, ScriptedChannel

from polyfeed.data.runtime.ws import Frame, Text


@pytest.fixture
def make_channel() -> Callable[..., ScriptedChannel]:
    """Build a ScriptedChannel; strings become text frames."""

    def _make(*items: str | Frame | Exception) -> ScriptedChannel:
        return ScriptedChannel([Text(item) if isinstance(item, str) else item for item in items])

    return _make


@pytest.fixture
def handshake_frames() -> tuple[str, ...]:
    """Server side messages of a successful handshake for two subscriptions."""
    return (CONNECTED_MSG, AUTH_RESP, SUB_RESP)
