"""
SQLite helpers for the user store.

``get_connection`` opens a connection whose rows behave like mappings,
``get_cursor`` wraps one unit of work (commit on success, always
close) and ``init_db`` brings the schema up to date.  Each helper takes
an optional database path and otherwise uses ``settings.database_url``.

Schema changes are listed in ``MIGRATIONS`` as ``(version, script)``
pairs.  The highest applied version is recorded in the ``migrations``
table; only newer scripts run.
"""

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import settings

MIGRATIONS: list[tuple[int, str]] = [
    # 1: users table.  AUTOINCREMENT keeps ids of deleted users from being reused.
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT,
            email TEXT
        );
        """,
    ),
]


def get_database_path(database_url: Optional[str] = None) -> str:
    """Return an absolute path for the database file.

    Relative paths are taken relative to the ``user_api`` package
    directory.
    """
    db_url = database_url or settings.database_url
    if os.path.isabs(db_url):
        return db_url
    package_dir = Path(__file__).resolve().parent.parent.parent
    return str((package_dir / db_url).resolve())


def get_connection(database_url: Optional[str] = None) -> sqlite3.Connection:
    """Open a connection that returns ``sqlite3.Row`` objects."""
    conn = sqlite3.connect(get_database_path(database_url))
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(database_url: Optional[str] = None) -> Iterator[sqlite3.Cursor]:
    """Yield a cursor for one unit of work.

    Changes are committed when the block exits normally and discarded
    when it raises.  The connection is closed either way.
    """
    conn = get_connection(database_url)
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def _applied_version(cursor: sqlite3.Cursor) -> int:
    row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
    return row["version"] or 0


def init_db(database_url: Optional[str] = None) -> None:
    """Create the database file if needed and run pending migrations.

    Safe to call on every start-up: already applied versions are
    skipped.
    """
    with get_cursor(database_url) as cursor:
        cursor.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
        applied = _applied_version(cursor)
        for version, script in MIGRATIONS:
            if version <= applied:
                continue
            cursor.executescript(script)
            cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
