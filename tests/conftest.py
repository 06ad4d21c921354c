import sqlite3
from contextlib import closing

import pytest

from toolbox.utils.paths import Config

SCHEMA = """
CREATE TABLE history (
    id TEXT PRIMARY KEY,
    timestamp INTEGER NOT NULL,
    duration INTEGER NOT NULL,
    exit INTEGER NOT NULL,
    command TEXT NOT NULL,
    cwd TEXT NOT NULL,
    session TEXT NOT NULL,
    hostname TEXT NOT NULL,
    deleted_at INTEGER,
    UNIQUE(timestamp, cwd, command)
)
"""

BASE_TS = 1_700_000_000_000_000_000


def add_entry(conn, cwd, command="ls", timestamp=None, deleted_at=None, entry_id=None):
    """Insert one history row and return its id."""
    count = conn.execute("SELECT COUNT(*) FROM history").fetchone()[0]
    entry_id = entry_id or f"id-{count:04d}"
    timestamp = BASE_TS + count * 1_000_000_000 if timestamp is None else timestamp
    conn.execute(
        "INSERT INTO history VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)",
        (entry_id, timestamp, 1_500_000, 0, command, cwd,
         "0123456789abcdef", "host:user", deleted_at),
    )
    conn.commit()
    return entry_id


def rows(conn):
    return conn.execute("SELECT * FROM history ORDER BY id").fetchall()


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "history.db"
    with closing(sqlite3.connect(path)) as conn:
        conn.execute(SCHEMA)
        conn.commit()
    return path


@pytest.fixture
def conn(db_path):
    with closing(sqlite3.connect(db_path)) as connection:
        yield connection


@pytest.fixture
def config(tmp_path, db_path):
    home = tmp_path / "home"
    home.mkdir()
    return Config(home=str(home), db_override=str(db_path))
