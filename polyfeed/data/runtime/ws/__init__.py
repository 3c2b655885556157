"""Runtime WebSocket helpers."""

from .channel import (
    Binary,
    Channel,
    Close,
    Frame,
    Ping,
    Pong,
    Text,
    TransportConfig,
    WebSocketChannel,
    connect,
)
from .codec import Request, decode, encode, make_subscribe_request
from .handshake import Handshake, HandshakeState, await_responses, check_responses, handshake
from .stream import EventStream, MessageDemultiplexer, open_event_stream, project_message

__all__ = [
    # Channel
    "Binary",
    "Channel",
    "Close",
    "Frame",
    "Ping",
    "Pong",
    "Text",
    "TransportConfig",
    "WebSocketChannel",
    "connect",
    # Codec
    "Request",
    "decode",
    "encode",
    "make_subscribe_request",
    # Handshake
    "Handshake",
    "HandshakeState",
    "await_responses",
    "check_responses",
    "handshake",
    # Stream
    "EventStream",
    "MessageDemultiplexer",
    "open_event_stream",
    "project_message",
]
