#!/usr/bin/env python3
"""subword - Inspect CamelCase and snake_case sub-word boundaries."""

from __future__ import annotations

import argparse
import os
import sys

from .config import OUTPUT_FORMATS, SETTING_KEYS
from .scanner import Direction
from .store import CONFIG_DIR


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="subword",
        description="Find sub-word boundaries inside CamelCase and snake_case identifiers",
        epilog="Examples: subword split PathANDNameWITHOUTExtension, subword move script_31337_path --offset 0",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--settings",
        metavar="PATH",
        help=f"Path to settings JSON file (overrides {CONFIG_DIR / 'settings.json'})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log scan diagnostics to stderr.",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    split_parser = subparsers.add_parser("split", help="List the sub-words of TEXT")
    split_parser.add_argument("text", metavar="TEXT", help="Text to split ('-' reads stdin)")
    split_parser.add_argument(
        "--format",
        "-o",
        choices=list(OUTPUT_FORMATS),
        help="Output format (default: table, or default_format from settings)",
    )

    move_parser = subparsers.add_parser("move", help="Move from an offset to a sub-word boundary")
    move_parser.add_argument("text", metavar="TEXT", help="Text to scan ('-' reads stdin)")
    move_parser.add_argument(
        "--offset",
        "-p",
        type=int,
        default=0,
        help="Starting offset (default: 0)",
    )
    move_parser.add_argument(
        "--direction",
        "-d",
        choices=[d.value for d in Direction],
        default=Direction.NEXT_START.value,
        help="Boundary to look for (default: next-start)",
    )
    move_parser.add_argument(
        "--count",
        "-c",
        type=int,
        help="Repeat count (default: 1, or default_count from settings)",
    )
    move_parser.add_argument(
        "--format",
        "-o",
        choices=["table", "json"],
        default="table",
        help="Output format (default: table)",
    )

    config_parser = subparsers.add_parser("config", help="Show or change settings")
    config_subparsers = config_parser.add_subparsers(dest="config_command", help="Config commands")
    config_subparsers.add_parser("show", help="Print the effective settings")
    set_parser = config_subparsers.add_parser("set", help="Save a setting")
    set_parser.add_argument("key", choices=list(SETTING_KEYS), help="Setting name")
    set_parser.add_argument(
        "value",
        help="New value (highlight_styles takes a comma-separated list of rich styles)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    if args.settings:
        os.environ["SUBWORD_SETTINGS_PATH"] = str(args.settings)
    if args.debug:
        os.environ["SUBWORD_DEBUG"] = "1"
    else:
        os.environ.pop("SUBWORD_DEBUG", None)

    from .commands import cmd_config_set, cmd_config_show, cmd_move, cmd_split

    if args.command == "split":
        return cmd_split(args)
    if args.command == "move":
        return cmd_move(args)
    if args.command == "config":
        if args.config_command == "show":
            return cmd_config_show(args)
        if args.config_command == "set":
            return cmd_config_set(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
