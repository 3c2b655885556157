"""Custom exception hierarchy."""

from __future__ import annotations


class DataError(Exception):
    """Base exception for all library errors."""

    pass


class TransportError(DataError):
    """The underlying channel failed or closed while it was still needed.

    Raised for socket level failures, unexpected close frames during the
    handshake, and failures to answer keep-alive pings.
    """

    pass


class DecodeError(DataError):
    """A message payload could not be decoded."""

    def __init__(self, message: str, payload: str | bytes | None = None) -> None:
        super().__init__(message)
        self.payload = payload


class ProtocolError(DataError):
    """The service did not follow the expected protocol.

    Covers handshake steps confirmed with an unexpected status code, an
    empty subscription set, and service initiated disconnects.
    """

    def __init__(self, message: str, operation: str | None = None, detail: str | None = None) -> None:
        super().__init__(message)
        self.operation = operation
        self.detail = detail


class ProviderError(DataError):
    """Error from the REST API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(ProviderError):
    """The requested resource does not exist.

    The reference endpoints also answer with this error for valid tickers
    while the market is closed.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=404)
