"""Command-line entry point."""

from __future__ import annotations

import argparse
from typing import Sequence

from anchor.commands import cat_command, fmt_command, hash_command


def build_parser() -> argparse.ArgumentParser:
    """Build the parser for the cat, hash and fmt subcommands."""
    parser = argparse.ArgumentParser(prog="anchor")
    commands = parser.add_subparsers(dest="command", required=True)

    cat = commands.add_parser("cat")
    cat.add_argument(
        "-f", "--file", dest="file_path", required=True, help="Show all content in file"
    )

    hash_parser = commands.add_parser("hash")
    hash_parser.add_argument(
        "-f", "--file", dest="file_path", required=True, help="Show hash of file"
    )
    hash_parser.add_argument(
        "-d", "--debug", action="store_true", default=False, help="Enable debug file"
    )

    fmt = commands.add_parser("fmt")
    fmt.add_argument("-f", "--file", dest="file_path", required=True, help="Format file")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments and run the chosen command."""
    args = build_parser().parse_args(argv)
    if args.command == "cat":
        cat_command(args.file_path)
    elif args.command == "hash":
        hash_command(args.file_path, args.debug)
    elif args.command == "fmt":
        fmt_command(args.file_path)
    return 0