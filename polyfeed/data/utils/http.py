"""HTTP client helper."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from ..core.exceptions import NotFoundError, ProviderError

logger = logging.getLogger(__name__)


class HTTPClient:
    """Async HTTP client wrapper.

    ``default_params`` are merged into the query string of every request,
    which is how the API key travels.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        default_params: dict[str, str] | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._default_params = dict(default_params or {})
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def _url(self, url: str) -> str:
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET request returning the decoded JSON body."""
        url = self._url(url)
        query = {**self._default_params, **(params or {})}
        logger.debug("GET %s", url)

        try:
            async with self.session.get(url, params=query, headers=headers) as response:
                if response.status == 404:
                    raise NotFoundError(f"resource not found: {url}")
                if response.status >= 400:
                    text = await response.text()
                    logger.error("GET %s failed with status %s", url, response.status)
                    raise ProviderError(
                        f"request failed with status {response.status}: {text}",
                        status_code=response.status,
                    )
                return await response.json()
        except aiohttp.ClientError as exc:
            raise ProviderError(f"request to {url} failed: {exc}") from exc
        except ValueError as exc:
            raise ProviderError(f"invalid JSON in response from {url}: {exc}") from exc

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
