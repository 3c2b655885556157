"""Message codec for the streaming protocol.

Inbound frames always carry a JSON array of objects tagged by ``ev``; a
single frame may batch several logical messages. Outbound requests are
compact JSON objects of the form ``{"action": ..., "params": ...}``.

Unknown ``ev`` tags and unknown status codes are decode errors, unknown
fields are ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ...core.enums import Action
from ...core.exceptions import DecodeError, ProtocolError
from ...models import ProtocolMessage, Subscription

logger = logging.getLogger(__name__)

_MESSAGES = TypeAdapter(list[ProtocolMessage])


class Request(BaseModel):
    """A request sent to the streaming service."""

    action: Action
    params: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def authenticate(cls, api_key: str) -> Request:
        return cls(action=Action.AUTHENTICATE, params=api_key)

    @classmethod
    def subscribe(cls, params: str) -> Request:
        return cls(action=Action.SUBSCRIBE, params=params)


def encode(request: Request) -> str:
    """Serialize a request to its text frame payload."""
    return request.model_dump_json()


def decode(data: str | bytes) -> list[ProtocolMessage]:
    """Decode one frame's payload into its batch of messages."""
    try:
        return _MESSAGES.validate_json(data)
    except PydanticValidationError as exc:
        logger.error("failed to decode message: %s", exc)
        raise DecodeError(f"failed to decode message: {exc}", payload=data) from exc


def make_subscribe_request(subscriptions: Iterable[Subscription]) -> tuple[Request, int]:
    """Build one subscribe request covering all ``subscriptions``.

    Returns the request along with the number of subscriptions in it,
    which is the number of confirmations to expect.
    """
    params = [str(subscription) for subscription in subscriptions]
    if not params:
        raise ProtocolError(
            "failed to subscribe to event stream: no subscriptions supplied",
            operation="subscription",
        )
    joined = ",".join(params)
    logger.debug("subscriptions: %s", joined)
    return Request.subscribe(joined), len(params)
