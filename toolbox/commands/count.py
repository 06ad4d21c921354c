"""Handler for the 'count' subcommand."""

from __future__ import annotations

import sqlite3

from toolbox.data import count_history


def run(conn: sqlite3.Connection, directory: str, recursive: bool = False) -> int:
    """Print and return the number of live history entries for directory."""
    count = count_history(conn, directory, recursive=recursive)
    suffix = " (including subdirectories)" if recursive else ""
    print(f"History entries for {directory}{suffix}: {count}")
    return count
