"""Protocol definitions for request objects carrying headers."""

from typing import Mapping, Protocol, runtime_checkable


@runtime_checkable
class Request(Protocol):
    """Protocol for HTTP request objects (requests, httpx, werkzeug)."""

    headers: Mapping[str, str]
