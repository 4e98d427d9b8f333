"""User-Agent handling for requests sessions."""

from typing import Optional

import requests
from requests import Session

from moby.useragent._user_agent import build_user_agent
from moby.useragent.headers import USER_AGENT_HEADER


def set_session_user_agent(session: Session, upstream: Optional[str] = None, override: Optional[str] = None):
    """Set the User-Agent header for the session, nesting the upstream User-Agent if provided."""
    session.headers[USER_AGENT_HEADER] = build_user_agent(upstream, override)


def create_session(*, upstream: Optional[str] = None, override: Optional[str] = None) -> Session:
    """Create a requests session that identifies itself with the docker User-Agent.

    Args:
        upstream: User-Agent of the client the session acts on behalf of
        override: Custom User-Agent used verbatim instead of the built one

    Returns:
        Configured requests Session
    """
    session = requests.Session()
    set_session_user_agent(session, upstream, override)
    return session
