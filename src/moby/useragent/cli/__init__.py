from __future__ import annotations

import argparse
import logging
import sys
from types import ModuleType

from moby.useragent import __version__
from moby.useragent.cli import kernel, show

PACKAGE_LOGGER = "moby.useragent"

_SUBCOMMANDS: list[ModuleType] = [show, kernel]

_EPILOG = """\
examples:
  moby-useragent show
  moby-useragent show --upstream "compose/2.23.0 (linux)"
  moby-useragent show --override "my-agent/1.0"
  moby-useragent kernel
"""


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="moby-useragent",
        description=(
            "Print the User-Agent header a docker client sends, optionally wrapping the User-Agent "
            "of an upstream client as UpstreamClient(...)."
        ),
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log skipped User-Agent fields and kernel lookup failures to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", help="show or kernel")

    for subcommand in _SUBCOMMANDS:
        subcommand.register_parser(subparsers)

    return parser


def _configure_logging(verbose: bool = False) -> None:
    logger = logging.getLogger(PACKAGE_LOGGER)
    # main() may run several times in one process; keep a single stderr handler
    if not any(getattr(h, "_moby_cli", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
        handler._moby_cli = True
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def main(args: list[str] | None = None) -> int:
    parser = create_parser()
    parsed = parser.parse_args(args)
    _configure_logging(verbose=parsed.verbose)

    commands = {subcommand.COMMAND: subcommand for subcommand in _SUBCOMMANDS}
    if parsed.command in commands:
        return commands[parsed.command].run(parsed)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
