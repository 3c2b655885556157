"""Caller-facing clients."""

from .client import Client

__all__ = ["Client"]
