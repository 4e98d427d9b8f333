from __future__ import annotations

import argparse
import json
import sys

from moby.useragent._user_agent import build_user_agent
from moby.useragent.config import DEFAULT_CONFIG_FILE_PATH, load_user_agent_config

COMMAND = "show"


def register_parser(subparsers: argparse._SubParsersAction) -> None:
    show_parser = subparsers.add_parser(
        COMMAND,
        help="Print the User-Agent header value",
    )
    show_parser.add_argument(
        "--upstream",
        metavar="UA",
        help="User-Agent of the upstream client, nested as UpstreamClient(...)",
    )
    show_parser.add_argument(
        "--override",
        metavar="UA",
        help="Custom User-Agent printed verbatim. Takes precedence over the config file.",
    )
    show_parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_FILE_PATH,
        help=f"Docker CLI config file path (default: {DEFAULT_CONFIG_FILE_PATH})",
    )
    show_parser.add_argument(
        "--no-config",
        action="store_true",
        default=False,
        help="Ignore the custom User-Agent from the config file and environment",
    )


def run(parsed: argparse.Namespace) -> int:
    try:
        override = parsed.override
        if not override and not parsed.no_config:
            override = load_user_agent_config(parsed.config).custom_user_agent

        print(build_user_agent(parsed.upstream, override))
        return 0
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in config file {parsed.config}: {e}", file=sys.stderr)
        return 1
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
