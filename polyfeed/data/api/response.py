"""Handling of the JSON envelope wrapped around REST results."""

from __future__ import annotations

from typing import Any

from ..core.exceptions import ProviderError


def unwrap(response: Any, key: str = "results") -> list[Any]:
    """Return the list stored under ``key`` in a response envelope.

    The service signals failures with ``"status": "ERROR"`` and an
    ``error`` text. A missing or null result list means there is no data.
    """
    if not isinstance(response, dict):
        raise ProviderError(f"unexpected response: {response!r}")
    if str(response.get("status", "")).upper() == "ERROR":
        detail = response.get("error") or response.get("message") or "unknown error"
        raise ProviderError(f"request failed: {detail}")
    results = response.get(key)
    if results is None:
        return []
    if not isinstance(results, list):
        raise ProviderError(f"unexpected {key!r} in response: {results!r}")
    return results
