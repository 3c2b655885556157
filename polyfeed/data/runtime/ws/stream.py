"""Event stream over an established channel.

After the handshake a single channel carries status messages and data
messages intermixed. ``MessageDemultiplexer`` turns frames into single
decoded messages, ``project_message`` drops control messages and turns a
disconnect into an error, and ``EventStream`` exposes the result as an
async iterator of events.

Messages of one batch are handed out last-in first-out. The service gives
no ordering guarantee for this feed, so popping from the end of the batch
is fine and callers must not rely on in-batch order. Messages held back
by the handshake form the first batch."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ...core.config import ApiInfo
from ...core.enums import StatusCode
from ...core.exceptions import DecodeError, ProtocolError, TransportError
from ...models import Event, ProtocolMessage, Status, Subscription
from .channel import Binary, Channel, Close, Ping, Pong, Text, TransportConfig, connect
from .codec import decode
from .handshake import handshake

logger = logging.getLogger(__name__)


class MessageDemultiplexer:
    """Pulls decoded messages off a channel one at a time."""

    def __init__(
        self, channel: Channel, pending: Iterable[ProtocolMessage] | None = None
    ) -> None:
        self._channel = channel
        self._pending: list[ProtocolMessage] = list(pending or ())
        self.stopped = False

    async def pull(self) -> ProtocolMessage | None:
        """Return the next message, or None at the end of the stream.

        Decode and transport failures stop the demultiplexer and are
        raised; every later pull returns None.
        """
        while not self.stopped:
            if self._pending:
                return self._pending.pop()

            try:
                frame = await self._channel.receive()
            except TransportError:
                self.stopped = True
                raise

            if frame is None or isinstance(frame, Close):
                logger.debug("stream closed by peer: %r", frame)
                self.stopped = True
            elif isinstance(frame, (Text, Binary)):
                logger.debug("message: %r", frame.data)
                try:
                    self._pending = decode(frame.data)
                except DecodeError:
                    self.stopped = True
                    raise
            elif isinstance(frame, Ping):
                try:
                    await self._channel.send(Pong(frame.data))
                except TransportError:
                    self.stopped = True
                    raise
            # Pong frames carry nothing for us.
        return None


def project_message(message: ProtocolMessage) -> Event | None:
    """Map a protocol message onto the event handed to callers.

    Statuses yield None, except for a disconnect which raises.
    """
    if isinstance(message, Status):
        if message.code == StatusCode.DISCONNECTED:
            raise ProtocolError(
                f"service disconnected client: {message.message}",
                operation="stream",
                detail=message.message,
            )
        return None
    return message


class EventStream:
    """Async iterator of events from one streaming session.

    The iterator is single consumer and forward only. It ends when the
    channel closes cleanly; a fatal error is raised exactly once and the
    iterator is exhausted afterwards. Closing the stream, or leaving an
    ``async with`` block, closes the channel.
    """

    def __init__(
        self, channel: Channel, pending: Iterable[ProtocolMessage] | None = None
    ) -> None:
        self._channel = channel
        self._demux = MessageDemultiplexer(channel, pending)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def __aiter__(self) -> EventStream:
        return self

    async def __anext__(self) -> Event:
        if self._closed:
            raise StopAsyncIteration
        try:
            while True:
                message = await self._demux.pull()
                if message is None:
                    break
                event = project_message(message)
                if event is not None:
                    return event
        except BaseException:
            self._demux.stopped = True
            await self.aclose()
            raise

        await self.aclose()
        raise StopAsyncIteration

    async def aclose(self) -> None:
        """Stop the stream and close the underlying channel."""
        if self._closed:
            return
        self._closed = True
        self._demux.stopped = True
        try:
            await self._channel.close()
        except TransportError as exc:
            logger.warning("failed to close channel cleanly: %s", exc)

    async def __aenter__(self) -> EventStream:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()


async def open_event_stream(
    api_info: ApiInfo,
    subscriptions: Iterable[Subscription],
    *,
    config: TransportConfig | None = None,
) -> EventStream:
    """Connect, authenticate, subscribe and return the event stream.

    Raises ProtocolError for an empty subscription set before any
    connection is made. If the handshake fails the channel is closed and
    the error is re-raised.
    """
    subscriptions = list(subscriptions)
    if not subscriptions:
        raise ProtocolError(
            "failed to subscribe to event stream: no subscriptions supplied",
            operation="subscription",
        )

    channel = await connect(api_info.stream_url, config)
    try:
        backlog = await handshake(
            channel, api_info.api_key.get_secret_value(), subscriptions
        )
    except BaseException:
        try:
            await channel.close()
        except TransportError as exc:
            logger.warning("failed to close channel after handshake failure: %s", exc)
        raise
    logger.debug("subscription successful")
    return EventStream(channel, backlog)
