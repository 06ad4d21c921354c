"""Handler for the 'list' subcommand.

Prints the most recent commands recorded in a directory, newest first.
"""

from __future__ import annotations

import sqlite3

from toolbox.data import list_history
from toolbox.utils.formatting import format_datetime, format_duration, ns_to_datetime


def run(conn: sqlite3.Connection, directory: str, limit: int = 10, recursive: bool = False) -> None:
    """Print up to limit history entries for directory."""
    print(f"Listing history for: {directory}\n")

    entries = list_history(conn, directory, limit=limit, recursive=recursive)
    if not entries:
        print("No history entries found")
        return

    print(f"Found {len(entries)} entries (showing up to {limit}):\n")

    for entry in entries:
        print(f"[{format_datetime(ns_to_datetime(entry.timestamp))}] {entry.command}")
        details = f"  Exit: {entry.exit} | Duration: {format_duration(entry.duration)} | Session: {entry.session[:8]}..."
        if recursive and entry.cwd != directory:
            details += f" | Dir: {entry.cwd}"
        print(details)
        print()
