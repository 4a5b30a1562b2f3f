#!/usr/bin/env python3
"""gamekeys - hotkey bindings for fheroes2."""

from __future__ import annotations

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="gamekeys",
        description="Inspect and edit fheroes2 hotkey bindings",
    )
    parser.add_argument(
        "--file",
        "-f",
        metavar="PATH",
        help="Hotkey file to load (default: fheroes2.key in the config directory)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log loaded bindings")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # show
    show_parser = subparsers.add_parser("show", help="List all hotkey bindings")
    show_parser.add_argument(
        "--format",
        "-o",
        default="table",
        choices=["table", "file"],
        help="Output format (default: table)",
    )

    # dump
    subparsers.add_parser("dump", help="Print the default hotkey file")

    # write
    write_parser = subparsers.add_parser("write", help="Write the loaded bindings to a hotkey file")
    write_parser.add_argument("path", help="Output file path")

    # name
    name_parser = subparsers.add_parser("name", help="Print the key bound to an event")
    name_parser.add_argument("event_name", help='Event name as written in the hotkey file, e.g. "end turn"')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # No command = launch TUI
    if args.command is None:
        from .app import HotkeysApp

        app = HotkeysApp(hotkey_file=args.file)
        app.run()
        return 0

    # Import commands lazily to speed up --help
    from .commands import cmd_dump, cmd_name, cmd_show, cmd_write

    if args.command == "show":
        return cmd_show(args)
    if args.command == "dump":
        return cmd_dump(args)
    if args.command == "write":
        return cmd_write(args)
    if args.command == "name":
        return cmd_name(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
