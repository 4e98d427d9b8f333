"""Reading and writing the User-Agent header."""

import logging
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ._protocols import Request

USER_AGENT_HEADER = "User-Agent"

logger = logging.getLogger(__name__)


def get_upstream_user_agent(request: "Request") -> Optional[str]:
    """Return the User-Agent an incoming request was sent with, if any.

    The header lookup is delegated to the request's own headers mapping, which is
    case-insensitive for requests, httpx and werkzeug.
    """
    upstream = request.headers.get(USER_AGENT_HEADER)
    if not upstream:
        logger.debug("Request carries no User-Agent header")
        return None
    return upstream
