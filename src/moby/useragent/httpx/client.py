"""User-Agent handling for httpx clients."""

from typing import Optional

import httpx

from moby.useragent._user_agent import build_user_agent
from moby.useragent.headers import USER_AGENT_HEADER


def _with_user_agent(kwargs: dict, upstream: Optional[str], override: Optional[str]) -> dict:
    headers = httpx.Headers(kwargs.pop("headers", None))
    headers.setdefault(USER_AGENT_HEADER, build_user_agent(upstream, override))
    kwargs["headers"] = headers
    return kwargs


def create_client(*, upstream: Optional[str] = None, override: Optional[str] = None, **kwargs) -> httpx.Client:
    """Create an httpx client that identifies itself with the docker User-Agent.

    Args:
        upstream: User-Agent of the client this one acts on behalf of
        override: Custom User-Agent used verbatim instead of the built one
        **kwargs: Additional arguments passed to httpx.Client (e.g. timeout, verify).
            A User-Agent in ``headers`` takes precedence over the built one.
    """
    return httpx.Client(**_with_user_agent(kwargs, upstream, override))


def create_async_client(
    *, upstream: Optional[str] = None, override: Optional[str] = None, **kwargs
) -> httpx.AsyncClient:
    """Async counterpart of create_client."""
    return httpx.AsyncClient(**_with_user_agent(kwargs, upstream, override))
