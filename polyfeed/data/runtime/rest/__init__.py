"""REST runtime abstractions."""

from .runner import ResponseAdapter, RestEndpointSpec, RESTTransport, RestRunner

__all__ = [
    "RESTTransport",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
]
