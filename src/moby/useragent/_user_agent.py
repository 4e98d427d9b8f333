"""User-Agent string handling for the docker client.

In accordance with RFC 7231 (5.5.3) the header is of the form::

    [docker client's UA] UpstreamClient([upstream client's UA])
"""

from typing import List, Optional

from moby.useragent import platform_info
from moby.useragent.config import BuildInfo
from moby.useragent.kernel import get_kernel_version
from moby.useragent.versions import VersionInfo, append_versions

UPSTREAM_CHARS_TO_ESCAPE = "()\\"


def _collect_versions(build: BuildInfo) -> List[VersionInfo]:
    versions = [
        VersionInfo(build.product, build.version),
        VersionInfo("python", platform_info.runtime_version()),
        VersionInfo("git-commit", build.git_commit),
    ]
    kernel_version = get_kernel_version()
    if kernel_version is not None:
        versions.append(VersionInfo("kernel", str(kernel_version)))
    versions.append(VersionInfo("os", platform_info.os_name()))
    versions.append(VersionInfo("arch", platform_info.arch_name()))
    return versions


def build_user_agent(
    upstream: Optional[str] = None,
    override: Optional[str] = None,
    *,
    build: Optional[BuildInfo] = None,
) -> str:
    """Build the User-Agent the docker client uses to identify itself.

    Args:
        upstream: User-Agent of the client this request is made on behalf of
        override: Custom User-Agent. When non-empty it is returned unchanged.
        build: Product name, version and commit. Defaults to this package's build.

    Returns:
        User-Agent string like
        "docker/24.0.0 python/3.11.4 git-commit/abc123 kernel/6.5.0 os/linux arch/amd64"
    """
    if override:
        return override

    user_agent = append_versions("", *_collect_versions(build or BuildInfo()))
    if upstream:
        return insert_upstream_user_agent(upstream, user_agent)
    return user_agent


def escape_str(s: str, chars_to_escape: str = UPSTREAM_CHARS_TO_ESCAPE) -> str:
    """Return s with every character in chars_to_escape prefixed by a backslash."""
    return "".join(f"\\{c}" if c in chars_to_escape else c for c in s)


def unescape_str(s: str) -> str:
    """Reverse escape_str: a backslash followed by any character yields that character."""
    chars = []
    it = iter(s)
    for c in it:
        if c == "\\":
            # A trailing lone backslash is kept as-is
            c = next(it, "\\")
        chars.append(c)
    return "".join(chars)


def insert_upstream_user_agent(upstream: str, user_agent: str) -> str:
    """Append the escaped upstream User-Agent: ``$user_agent UpstreamClient($upstream)``."""
    return f"{user_agent} UpstreamClient({escape_str(upstream)})"
