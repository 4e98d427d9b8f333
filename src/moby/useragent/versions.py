"""Name/version tokens as they appear in a User-Agent header."""

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

HTTP_UA_KEY_VALUE_SEP = "/"
HTTP_UA_ENTRY_SEP = " "

# Characters that would break the token structure of the header
_STOP_CHARS = " \t\r\n/"


@dataclass(frozen=True)
class VersionInfo:
    name: str
    version: str

    def is_valid(self) -> bool:
        """Return True if both fields are non-empty and free of separator characters."""
        for value in (self.name, self.version):
            if not value or any(c in _STOP_CHARS for c in value):
                return False
        return True

    def __str__(self) -> str:
        return f"{self.name}{HTTP_UA_KEY_VALUE_SEP}{self.version}"


def append_versions(base: str, *versions: VersionInfo) -> str:
    """Append ``name/version`` tokens to a base User-Agent string.

    Args:
        base: Existing User-Agent string, may be empty
        versions: Ordered pairs to append. Invalid pairs are skipped.

    Returns:
        The tokens joined by single spaces, e.g. "docker/24.0.0 python/3.11.4"
    """
    if not versions:
        return base

    entries = [base] if base else []
    for v in versions:
        if not v.is_valid():
            logger.debug(f"Skipping invalid User-Agent version entry: {v.name!r}={v.version!r}")
            continue
        entries.append(str(v))
    return HTTP_UA_ENTRY_SEP.join(entries)
