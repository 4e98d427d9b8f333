"""Runtime, operating system and architecture identifiers."""

import platform
import sys

# platform.machine() values mapped to the names used in Docker User-Agents
_ARCH_ALIASES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "x64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "386",
    "i486": "386",
    "i586": "386",
    "i686": "386",
    "x86": "386",
    "armv5l": "arm",
    "armv6l": "arm",
    "armv7l": "arm",
    "armv8l": "arm",
}


def runtime_version() -> str:
    return platform.python_version()


def os_name() -> str:
    """Lowercase OS identifier, e.g. "linux", "darwin" or "windows"."""
    return platform.system().lower() or sys.platform


def arch_name() -> str:
    machine = platform.machine().lower()
    return _ARCH_ALIASES.get(machine, machine)
