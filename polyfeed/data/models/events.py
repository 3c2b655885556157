"""Tagged unions over the stream's message kinds.

``ProtocolMessage`` is everything that can appear in an inbound batch,
discriminated by the ``ev`` tag. ``Event`` is the subset handed to
callers: the four data kinds, never a status.
"""

from __future__ import annotations

from typing import Annotated, Union

from pydantic import Field

from .aggregate import MinuteAggregate, SecondAggregate
from .quote import Quote
from .status import Status
from .trade import Trade

Event = Annotated[
    Union[SecondAggregate, MinuteAggregate, Trade, Quote],
    Field(discriminator="ev"),
]

ProtocolMessage = Annotated[
    Union[Status, SecondAggregate, MinuteAggregate, Trade, Quote],
    Field(discriminator="ev"),
]

EVENT_TYPES = (SecondAggregate, MinuteAggregate, Trade, Quote)
