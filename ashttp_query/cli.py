"""Command-line interface for ashttp-query."""

from __future__ import annotations

import argparse
import binascii
import logging
import sys
from pathlib import Path
from typing import Optional

from . import constants
from .config import load_config
from .core.decoder import QueryDecodeError
from .logging import configure_logging
from .render import render_json
from .transport import InvalidQueryUrlError, parse_base64_query, parse_query_url

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=constants.APP_NAME,
        description="Decode base64-encoded ActiveSync HTTP queries",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=constants.DEFAULT_CONFIG_PATH,
        help=f"Path to configuration file (default: {constants.DEFAULT_CONFIG_PATH})",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("demo", help="Decode a built-in example query")

    decode_parser = subparsers.add_parser(
        "decode", help="Decode a base64 query string or a full request URL"
    )
    decode_parser.add_argument("query", help="Base64 query or request URL")

    subparsers.add_parser(
        "show-config", help="Print the resolved configuration and exit"
    )

    return parser


def _decode_and_print(text: str, *, indent: int) -> int:
    try:
        if "://" in text:
            query = parse_query_url(text)
        else:
            query = parse_base64_query(text)
    except QueryDecodeError as exc:
        LOGGER.error("Invalid query (%s at offset %d): %s", exc.code, exc.offset, exc)
        return 1
    except (binascii.Error, InvalidQueryUrlError) as exc:
        LOGGER.error("Invalid query transport: %s", exc)
        return 1

    print(render_json(query, indent=indent or None))
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config(args.config)
    configure_logging(config.logging.level, log_path=config.logging.path)

    if args.command == "demo":
        return _decode_and_print(constants.EXAMPLE_QUERY, indent=config.output.indent)

    if args.command == "decode":
        return _decode_and_print(args.query, indent=config.output.indent)

    if args.command == "show-config":
        print(f"Configuration loaded from {config.path!s}\n")
        for section in config.raw.sections():
            print(f"[{section}]")
            for key, value in config.raw[section].items():
                print(f"{key} = {value}")
            print()
        return 0

    LOGGER.error("Unknown command: %s", args.command)
    return 1


if __name__ == "__main__":
    sys.exit(main())
