"""Handler for the 'move' subcommand.

Rewrites the working directory of matching history entries in place.
"""

from __future__ import annotations

import sqlite3

from toolbox.data import count_history, move_history


def run(conn: sqlite3.Connection, from_path: str, to_path: str,
        dry_run: bool = False, recursive: bool = False) -> int:
    """Move history from from_path to to_path and report the result.

    Returns the number of entries moved, or that would be moved on a dry run.
    """
    print(f"Moving history from: {from_path}")
    print(f"                 to: {to_path}")

    count = count_history(conn, from_path, recursive=recursive)
    if count == 0:
        print(f"No history entries found for directory: {from_path}")
        return 0

    print(f"Found {count} history entries to move")

    if dry_run:
        print("DRY RUN: No changes will be made")
        return count

    moved = move_history(conn, from_path, to_path, recursive=recursive)
    print(f"Successfully moved {moved} entries")
    return moved
