import logging
import os
from logging import NullHandler

logging.getLogger(__name__).addHandler(NullHandler())

try:
    from ._version import __version__
except ImportError:
    __version__ = "0.0.0"

DEFAULT_PRODUCT_NAME = "docker"

# Commit the package was built from, injected by the release pipeline
GIT_COMMIT = os.environ.get("DOCKER_GITCOMMIT") or "unknown"

from moby.useragent._user_agent import (  # noqa: E402
    build_user_agent,
    escape_str,
    insert_upstream_user_agent,
    unescape_str,
)
from moby.useragent.versions import VersionInfo, append_versions  # noqa: E402

__all__ = [
    "VersionInfo",
    "append_versions",
    "build_user_agent",
    "escape_str",
    "insert_upstream_user_agent",
    "unescape_str",
]
