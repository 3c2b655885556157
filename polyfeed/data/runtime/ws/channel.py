"""Duplex message channel abstraction and its websockets implementation.

The handshake and the stream only ever talk to a ``Channel``: something
that sends frames, receives frames one at a time and can be closed. The
production implementation wraps a ``websockets`` client connection; tests
substitute scripted channels.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol, Union

import websockets
from websockets.exceptions import ConnectionClosedError, ConnectionClosedOK, WebSocketException

from ...core.exceptions import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Text:
    data: str


@dataclass(frozen=True)
class Binary:
    data: bytes


@dataclass(frozen=True)
class Ping:
    data: bytes = b""


@dataclass(frozen=True)
class Pong:
    data: bytes = b""


@dataclass(frozen=True)
class Close:
    code: int | None = None
    reason: str = ""


Frame = Union[Text, Binary, Ping, Pong, Close]


class Channel(Protocol):
    """A bidirectional, message oriented connection."""

    async def send(self, frame: Frame) -> None:
        """Send one frame, raising TransportError on failure."""
        ...

    async def receive(self) -> Frame | None:
        """Receive the next frame.

        Returns None once the channel is exhausted and raises
        TransportError when the channel fails.
        """
        ...

    async def close(self) -> None:
        """Close the channel. Safe to call more than once."""
        ...


@dataclass
class TransportConfig:
    """Connection options passed through to ``websockets.connect``."""

    ping_interval: float | None = 30
    ping_timeout: float | None = 10
    open_timeout: float | None = 10
    close_timeout: float | None = 5
    max_size: int | None = 2**22
    max_queue: int | None = 1024

    def connect_kwargs(self) -> dict[str, Any]:
        return {
            "ping_interval": self.ping_interval,
            "ping_timeout": self.ping_timeout,
            "open_timeout": self.open_timeout,
            "close_timeout": self.close_timeout,
            "max_size": self.max_size,
            "max_queue": self.max_queue,
        }


class WebSocketChannel:
    """Channel backed by a ``websockets`` client connection.

    The library answers pings itself, so ``Ping``/``Pong`` frames are never
    produced here. A normal close is reported as one ``Close`` frame,
    after which the channel is exhausted.
    """

    def __init__(self, ws: Any) -> None:
        self._ws = ws
        self._exhausted = False

    async def send(self, frame: Frame) -> None:
        try:
            if isinstance(frame, (Text, Binary)):
                await self._ws.send(frame.data)
            elif isinstance(frame, Pong):
                await self._ws.pong(frame.data)
            elif isinstance(frame, Ping):
                await self._ws.ping(frame.data)
            elif isinstance(frame, Close):
                await self.close()
            else:
                raise TypeError(f"Unsupported frame: {frame!r}")
        except (WebSocketException, OSError) as exc:
            logger.error("failed to send %s frame: %s", type(frame).__name__, exc)
            raise TransportError(f"failed to send {type(frame).__name__} frame: {exc}") from exc

    async def receive(self) -> Frame | None:
        if self._exhausted:
            return None
        try:
            data = await self._ws.recv()
        except ConnectionClosedOK as exc:
            self._exhausted = True
            rcvd = exc.rcvd
            return Close(rcvd.code if rcvd else None, rcvd.reason if rcvd else "")
        except ConnectionClosedError as exc:
            self._exhausted = True
            raise TransportError(f"websocket connection closed with error: {exc}") from exc
        except (WebSocketException, OSError) as exc:
            self._exhausted = True
            raise TransportError(f"failed to receive from websocket: {exc}") from exc

        if isinstance(data, str):
            return Text(data)
        return Binary(bytes(data))

    async def close(self) -> None:
        self._exhausted = True
        await self._ws.close()


async def connect(url: str, config: TransportConfig | None = None) -> WebSocketChannel:
    """Open a websocket connection to ``url`` and wrap it in a channel."""
    conf = config or TransportConfig()
    logger.debug("connecting to %s", url)
    try:
        ws = await websockets.connect(url, **conf.connect_kwargs())
    except (WebSocketException, OSError, TimeoutError) as exc:
        logger.error("failed to connect to %s: %s", url, exc)
        raise TransportError(f"failed to connect to {url}: {exc}") from exc
    logger.debug("connection successful")
    return WebSocketChannel(ws)
