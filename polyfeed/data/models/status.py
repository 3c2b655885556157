"""Status (control) message model."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import StatusCode


class Status(BaseModel):
    """A status indication for an operation.

    The service mixes these control messages freely with event data.
    They are consumed by the handshake and the stream and never handed to
    callers.
    """

    ev: Literal["status"] = "status"
    code: StatusCode = Field(..., alias="status")
    message: str = Field(..., alias="message")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")
