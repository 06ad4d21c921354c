"""Handler for the 'copy' subcommand.

Duplicates matching history entries under a new directory, keeping the
originals in place.
"""

from __future__ import annotations

import sqlite3

from toolbox.data import CopyResult, copy_history, count_history


def run(conn: sqlite3.Connection, from_path: str, to_path: str,
        dry_run: bool = False, recursive: bool = False) -> CopyResult:
    """Copy history from one directory to another and report the result.

    Returns the CopyResult; on a dry run its count is what would be copied.
    """
    print(f"Copying history from: {from_path}")
    print(f"                  to: {to_path}")

    count = count_history(conn, from_path, recursive=recursive)
    if count == 0:
        print(f"No history entries found for directory: {from_path}")
        return CopyResult(copied=0)

    print(f"Found {count} history entries to copy")

    if dry_run:
        print("DRY RUN: No changes will be made")
        return CopyResult(copied=count)

    result = copy_history(conn, from_path, to_path, recursive=recursive)
    print(f"Successfully copied {result.copied} entries")
    if result.failures:
        print(f"Failed to copy {len(result.failures)} entries")
    return result
