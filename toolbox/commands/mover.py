"""Entry point for atuin-mover.

Parses the command line, resolves the Atuin database once, and hands an
open connection to the move/copy/list/count handlers.
"""

from __future__ import annotations

import argparse
import sqlite3
import sys
from contextlib import closing
from typing import List, Optional

from toolbox.commands import copy, count, ls, move
from toolbox.utils.cli import UsageParser
from toolbox.utils.paths import Config, HomeDirectoryError, normalize_path

DEFAULT_LIST_LIMIT = 10

_EPILOG = """\
commands:
  move <from> <to>      Move history entries from one directory to another
  copy <from> <to>      Copy history entries from one directory to another
  list <dir> [limit]    List history entries for a directory (default limit: 10)
  count <dir>           Count history entries for a directory

examples:
  # Move history from old to new project directory
  atuin-mover move ~/projects/old-name ~/projects/new-name

  # Move a whole tree, keeping nested directories
  atuin-mover move ~/projects/old-name ~/projects/new-name -r

  # Copy history (keeps both)
  atuin-mover copy ~/projects/template ~/projects/new-project

  # Preview changes without modifying
  atuin-mover move ~/old ~/new --dry-run

  # List recent commands from a directory
  atuin-mover list ~/projects/myapp 20

environment:
  ATUIN_DB_PATH        Custom path to Atuin database
  XDG_DATA_HOME        XDG data directory (default: ~/.local/share)
"""

# command -> number of required positional arguments
_ARITY = {"move": 2, "copy": 2, "list": 1, "count": 1}
_USAGE_HINT = {"move": "<from> and <to>", "copy": "<from> and <to>", "list": "<dir>", "count": "<dir>"}


def build_parser() -> UsageParser:
    parser = UsageParser(
        prog="atuin-mover",
        description="Move or copy Atuin shell history between directories.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("command", help="move, copy, list or count")
    parser.add_argument("args", nargs="*", help="command arguments")
    parser.add_argument("--dry-run", action="store_true",
                        help="show what would be changed without making changes")
    parser.add_argument("-r", "--recursive", action="store_true",
                        help="include entries recorded in subdirectories")
    parser.add_argument("--db", metavar="PATH",
                        help="path to Atuin database (overrides ATUIN_DB_PATH)")
    return parser


def _parse_limit(parser: UsageParser, raw: Optional[str]) -> int:
    if raw is None:
        return DEFAULT_LIST_LIMIT
    try:
        limit = int(raw, 10)
    except ValueError:
        parser.error(f"invalid limit '{raw}'")
    if limit < 1:
        parser.error(f"limit must be a positive integer, got {limit}")
    return limit


def main(argv: Optional[List[str]] = None, config: Optional[Config] = None) -> int:
    """Run atuin-mover. Returns the process exit status."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()

    if not argv:
        parser.print_help()
        return 0

    args = parser.parse_intermixed_args(argv)
    command = args.command

    if command not in _ARITY:
        parser.error(f"Unknown command '{command}'")
    if len(args.args) < _ARITY[command]:
        parser.error(f"{command} requires {_USAGE_HINT[command]} arguments")
    if len(args.args) > _ARITY[command] + (1 if command == "list" else 0):
        parser.error(f"too many arguments for {command}")

    limit = _parse_limit(parser, args.args[1] if command == "list" and len(args.args) > 1 else None)

    config = Config.from_env() if config is None else config

    try:
        db_path = config.db_path(args.db)
        paths = [normalize_path(p, config) for p in args.args[:_ARITY[command]]]
    except HomeDirectoryError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not db_path.exists():
        print(f"Error: Atuin database not found at: {db_path}", file=sys.stderr)
        print("Make sure Atuin is installed and has been used at least once.", file=sys.stderr)
        print("You can specify a custom path with --db <path>", file=sys.stderr)
        return 1

    print(f"Using database: {db_path}\n")

    try:
        with closing(sqlite3.connect(db_path)) as conn:
            if command == "move":
                move.run(conn, paths[0], paths[1], dry_run=args.dry_run, recursive=args.recursive)
            elif command == "copy":
                copy.run(conn, paths[0], paths[1], dry_run=args.dry_run, recursive=args.recursive)
            elif command == "list":
                ls.run(conn, paths[0], limit=limit, recursive=args.recursive)
            else:
                count.run(conn, paths[0], recursive=args.recursive)
    except sqlite3.Error as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
