"""Connect, authenticate and subscribe handshake.

The handshake is strictly sequential:

    AWAIT_CONNECTED -> AUTHENTICATING -> AWAIT_AUTH_CONFIRMED
        -> SUBSCRIBING -> AWAIT_SUBSCRIBE_CONFIRMED -> DONE

with FAILED reachable from every step. Each awaiting step counts status
confirmations of one expected code. The service does not order control
messages before the data they relate to, so data messages seen while
counting are not counted; an event can arrive ahead of its own
subscription's acknowledgement. Such messages, along with anything left
unscanned in the batch that completed a step, are kept in a backlog that
the event stream delivers first.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from enum import Enum

from ...core.enums import Action, StatusCode
from ...core.exceptions import ProtocolError, TransportError
from ...models import ProtocolMessage, Status, Subscription
from .channel import Binary, Channel, Close, Ping, Pong, Text
from .codec import Request, decode, encode, make_subscribe_request

logger = logging.getLogger(__name__)


class HandshakeState(Enum):
    AWAIT_CONNECTED = "await_connected"
    AUTHENTICATING = "authenticating"
    AWAIT_AUTH_CONFIRMED = "await_auth_confirmed"
    SUBSCRIBING = "subscribing"
    AWAIT_SUBSCRIBE_CONFIRMED = "await_subscribe_confirmed"
    DONE = "done"
    FAILED = "failed"


def check_responses(
    messages: Sequence[ProtocolMessage],
    expected: StatusCode,
    remaining: int,
    operation: str,
    backlog: list[ProtocolMessage] | None = None,
) -> int:
    """Count the confirmations in one decoded batch.

    Returns the number of confirmations still outstanding. Non status
    messages are not counted; they are appended to ``backlog`` when one is
    given, as are the entries following the last needed confirmation. A
    status with any other code than ``expected`` fails the operation with
    the service's message text.
    """
    if remaining <= 0:
        raise ValueError("remaining must be positive")

    for index, message in enumerate(messages):
        if not isinstance(message, Status):
            if backlog is not None:
                backlog.append(message)
            continue
        if message.code != expected:
            raise ProtocolError(
                f"{operation} not successful: {message.message}",
                operation=operation,
                detail=message.message,
            )
        remaining -= 1
        if remaining == 0:
            if backlog is not None:
                backlog.extend(messages[index + 1 :])
            break
    return remaining


async def await_responses(
    channel: Channel,
    expected: StatusCode,
    count: int,
    operation: str,
    backlog: list[ProtocolMessage] | None = None,
) -> None:
    """Read frames until ``count`` statuses of code ``expected`` arrived."""
    remaining = count
    while remaining > 0:
        frame = await channel.receive()
        if frame is None or isinstance(frame, Close):
            logger.error("connection closed during %s", operation)
            raise TransportError("websocket connection closed unexpectedly")

        logger.debug("response: %r", frame)
        if isinstance(frame, (Text, Binary)):
            remaining = check_responses(
                decode(frame.data), expected, remaining, operation, backlog
            )
        elif isinstance(frame, Ping):
            await channel.send(Pong(frame.data))


class Handshake:
    """Drives one handshake over a channel.

    An instance is single use: ``run`` either reaches DONE or raises and
    leaves the instance in FAILED. Data messages received along the way are
    collected in ``backlog`` in arrival order.
    """

    def __init__(
        self,
        channel: Channel,
        api_key: str,
        subscriptions: Iterable[Subscription],
    ) -> None:
        self._channel = channel
        self._api_key = api_key
        self._subscriptions = subscriptions
        self.state = HandshakeState.AWAIT_CONNECTED
        self.backlog: list[ProtocolMessage] = []

    async def run(self) -> None:
        if self.state is not HandshakeState.AWAIT_CONNECTED:
            raise RuntimeError(f"handshake cannot be run in state {self.state.name}")
        try:
            await self._await_connected()
            await self._authenticate()
            await self._subscribe()
        except BaseException:
            self.state = HandshakeState.FAILED
            raise
        self.state = HandshakeState.DONE

    async def _await_connected(self) -> None:
        # Initial confirmation of connection; nothing is sent for it.
        await await_responses(
            self._channel, StatusCode.CONNECTED, 1, "connection", self.backlog
        )

    async def _authenticate(self) -> None:
        self.state = HandshakeState.AUTHENTICATING
        await self._send(Request.authenticate(self._api_key), "auth")

        self.state = HandshakeState.AWAIT_AUTH_CONFIRMED
        await await_responses(
            self._channel, StatusCode.AUTH_SUCCESS, 1, "authentication", self.backlog
        )

    async def _subscribe(self) -> None:
        self.state = HandshakeState.SUBSCRIBING
        request, count = make_subscribe_request(self._subscriptions)
        await self._send(request, "subscribe")

        self.state = HandshakeState.AWAIT_SUBSCRIBE_CONFIRMED
        await await_responses(
            self._channel, StatusCode.SUCCESS, count, "subscription", self.backlog
        )

    async def _send(self, request: Request, name: str) -> None:
        payload = encode(request)
        # The auth request carries the credential.
        if request.action is not Action.AUTHENTICATE:
            logger.debug("request: %s", payload)
        try:
            await self._channel.send(Text(payload))
        except TransportError:
            logger.error("failed to send stream %s request", name)
            raise


async def handshake(
    channel: Channel,
    api_key: str,
    subscriptions: Iterable[Subscription],
) -> list[ProtocolMessage]:
    """Authenticate with and subscribe to the streaming service.

    Returns the messages that arrived during the handshake but still have
    to be delivered by the stream.
    """
    driver = Handshake(channel, api_key, subscriptions)
    await driver.run()
    return driver.backlog
