"""Kernel version lookup for the host running the client.

The lookup is best-effort: hosts that do not expose a parsable release string
(some containers, Windows builds, restricted sandboxes) yield ``None`` instead
of an error, and callers simply leave the kernel out.
"""

import logging
import platform
import re
from dataclasses import dataclass, field
from typing import Optional

logger = logging.getLogger(__name__)

# kernel.major[.minor]<flavor>, e.g. "5.15.0-91-generic" or "3.4.54.longterm-1"
_RELEASE_RE = re.compile(r"^(\d+)\.(\d+)(?:\.(\d+))?(.*)$", re.DOTALL)


@dataclass(frozen=True, order=True)
class KernelVersionInfo:
    kernel: int
    major: int
    minor: int
    flavor: str = field(default="", compare=False)

    def __str__(self) -> str:
        return f"{self.kernel}.{self.major}.{self.minor}{self.flavor}"


def parse_release(release: str) -> KernelVersionInfo:
    """Parse a kernel release string such as ``3.8.0-19-generic``.

    Raises:
        ValueError: if the release does not start with ``kernel.major``
    """
    match = _RELEASE_RE.match(release.strip())
    if not match:
        raise ValueError(f"Can't parse kernel version {release!r}")
    kernel, major, minor, flavor = match.groups()
    return KernelVersionInfo(
        kernel=int(kernel),
        major=int(major),
        minor=int(minor) if minor is not None else 0,
        flavor=flavor,
    )


def get_kernel_version() -> Optional[KernelVersionInfo]:
    """Return the host kernel version, or None if it cannot be determined."""
    release = platform.release()
    if not release:
        logger.debug("Kernel release is not available on this platform")
        return None
    try:
        return parse_release(release)
    except ValueError as e:
        logger.debug(f"Could not determine kernel version: {e}")
        return None


def compare_kernel_version(a: KernelVersionInfo, b: KernelVersionInfo) -> int:
    """Compare two kernel versions, ignoring flavor.

    Returns:
        -1 if a < b, 0 if equal, 1 if a > b
    """
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def check_kernel_version(kernel: int, major: int, minor: int) -> bool:
    """Return True if the host kernel is at least ``kernel.major.minor``."""
    current = get_kernel_version()
    if current is None:
        return False
    return compare_kernel_version(current, KernelVersionInfo(kernel, major, minor)) >= 0
