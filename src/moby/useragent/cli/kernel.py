from __future__ import annotations

import argparse
import sys

from moby.useragent.kernel import get_kernel_version

COMMAND = "kernel"


def register_parser(subparsers: argparse._SubParsersAction) -> None:
    subparsers.add_parser(
        COMMAND,
        help="Print the host kernel version as it appears in the User-Agent",
    )


def run(parsed: argparse.Namespace) -> int:
    kernel_version = get_kernel_version()
    if kernel_version is None:
        print("Error: Kernel version is not available on this host", file=sys.stderr)
        return 1
    print(kernel_version)
    return 0
