"""Query and rewrite the Atuin ``history`` table by working directory."""

from __future__ import annotations

import sqlite3
import sys
import uuid
from typing import Callable, Dict, List

from toolbox.data.models import CopyResult, HistoryEntry

COLUMNS = ("id", "timestamp", "duration", "exit", "command", "cwd", "session", "hostname", "deleted_at")
LIVE_PREDICATE = "deleted_at IS NULL"

_SELECT_COLUMNS = ", ".join(COLUMNS)


def _new_id() -> str:
    return uuid.uuid4().hex


def _root(path: str) -> str:
    """Strip trailing separators so '/' becomes '' and prefixes join cleanly."""
    return path.rstrip("/")


def _where(recursive: bool) -> str:
    """WHERE clause shared by every query: directory match plus the soft-delete filter."""
    if recursive:
        match = "(cwd = :dir OR substr(cwd, 1, :prefix_len) = :prefix)"
    else:
        match = "cwd = :dir"
    return f"{match} AND {LIVE_PREDICATE}"


def _params(directory: str) -> Dict[str, object]:
    prefix = _root(directory) + "/"
    return {"dir": directory, "prefix": prefix, "prefix_len": len(prefix)}


def _to_entry(row: tuple) -> HistoryEntry:
    return HistoryEntry(*row)


def remap_cwd(cwd: str, from_path: str, to_path: str) -> str:
    """Rewrite cwd from under from_path to under to_path.

    An exact match maps to to_path itself; nested paths keep their suffix,
    so '/a/b/sub' moved from '/a/b' to '/x/y' becomes '/x/y/sub'.
    """
    if cwd == from_path:
        return to_path
    return _root(to_path) + cwd[len(_root(from_path)):]


def count_history(conn: sqlite3.Connection, directory: str, recursive: bool = False) -> int:
    """Count live history entries recorded in directory (or under it when recursive)."""
    row = conn.execute(
        f"SELECT COUNT(*) FROM history WHERE {_where(recursive)}",
        _params(directory),
    ).fetchone()
    return row[0]


def select_history(conn: sqlite3.Connection, directory: str, recursive: bool = False) -> List[HistoryEntry]:
    """Return every live entry matching directory, oldest first."""
    rows = conn.execute(
        f"SELECT {_SELECT_COLUMNS} FROM history WHERE {_where(recursive)} ORDER BY timestamp ASC",
        _params(directory),
    ).fetchall()
    return [_to_entry(row) for row in rows]


def list_history(conn: sqlite3.Connection, directory: str, limit: int = 10,
                 recursive: bool = False) -> List[HistoryEntry]:
    """Return up to limit live entries for directory, newest first."""
    params = _params(directory)
    params["limit"] = limit
    rows = conn.execute(
        f"SELECT {_SELECT_COLUMNS} FROM history WHERE {_where(recursive)} "
        "ORDER BY timestamp DESC LIMIT :limit",
        params,
    ).fetchall()
    return [_to_entry(row) for row in rows]


def move_history(conn: sqlite3.Connection, from_path: str, to_path: str,
                 dry_run: bool = False, recursive: bool = False) -> int:
    """Rewrite cwd of every matching entry from from_path to to_path.

    Both modes issue a single UPDATE, so the batch is applied or rejected as
    a whole. Returns the number of rows changed (or that would change).
    """
    count = count_history(conn, from_path, recursive=recursive)
    if count == 0 or dry_run:
        return count

    params = _params(from_path)
    params.update({
        "to": to_path,
        "to_root": _root(to_path),
        "cut": len(_root(from_path)) + 1,
    })
    cursor = conn.execute(
        "UPDATE history SET cwd = CASE WHEN cwd = :dir THEN :to "
        "ELSE :to_root || substr(cwd, :cut) END "
        f"WHERE {_where(recursive)}",
        params,
    )
    conn.commit()
    return cursor.rowcount


def copy_history(conn: sqlite3.Connection, from_path: str, to_path: str,
                 dry_run: bool = False, recursive: bool = False,
                 new_id: Callable[[], str] = _new_id) -> CopyResult:
    """Duplicate every matching entry under a new id with a remapped cwd.

    Source rows are never touched. A row whose insert fails is recorded in
    the result's failures and the batch carries on.
    """
    entries = select_history(conn, from_path, recursive=recursive)
    if not entries or dry_run:
        return CopyResult(copied=len(entries))

    placeholders = ", ".join("?" for _ in COLUMNS)
    insert = f"INSERT INTO history ({_SELECT_COLUMNS}) VALUES ({placeholders})"

    result = CopyResult(copied=0)
    for entry in entries:
        try:
            conn.execute(insert, (
                new_id(),
                entry.timestamp,
                entry.duration,
                entry.exit,
                entry.command,
                remap_cwd(entry.cwd, from_path, to_path),
                entry.session,
                entry.hostname,
                entry.deleted_at,
            ))
        except sqlite3.Error as exc:
            print(f"Warning: Failed to copy entry {entry.id}: {exc}", file=sys.stderr)
            result.failures.append((entry, exc))
            continue
        result.copied += 1

    conn.commit()
    return result
