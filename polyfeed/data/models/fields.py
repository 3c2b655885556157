"""Reusable annotated field types for wire models."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer

from ..utils.time import from_millis, to_millis


def _parse_millis(value: Any) -> Any:
    # bool is an int subclass but never a timestamp
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return from_millis(value)
    return value


MillisTimestamp = Annotated[
    datetime,
    BeforeValidator(_parse_millis),
    PlainSerializer(to_millis, return_type=int),
]
"""Epoch milliseconds on the wire, an exchange-local datetime in Python."""
