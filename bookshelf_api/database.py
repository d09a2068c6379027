"""SQLite connection handling and schema migrations."""

from __future__ import annotations

import sqlite3
from datetime import datetime

_AUDIT = "created_at TEXT, created_by TEXT, modified_at TEXT, modified_by TEXT"
_KEY = "id INTEGER PRIMARY KEY AUTOINCREMENT"

MIGRATIONS = (
    ("1_create_users", f"CREATE TABLE users ({_KEY}, username TEXT NOT NULL UNIQUE,"
     f" password TEXT NOT NULL, {_AUDIT});"),
    ("2_create_categories", f"CREATE TABLE categories ({_KEY}, name TEXT NOT NULL, {_AUDIT});"),
    ("3_create_books", f"CREATE TABLE books ({_KEY}, title TEXT NOT NULL, description TEXT,"
     " image_url TEXT, release_year INTEGER, price INTEGER, total_page INTEGER,"
     f" thickness TEXT, category_id INTEGER, {_AUDIT});"),
)


def connect(path) -> sqlite3.Connection:
    """Open the database at ``path`` with rows addressable by column name."""
    conn = sqlite3.connect(path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn


def migrate(conn: sqlite3.Connection) -> int:
    """Apply pending migrations and return how many were applied."""
    with conn:
        conn.execute("CREATE TABLE IF NOT EXISTS schema_migrations"
                     " (id TEXT PRIMARY KEY, applied_at TEXT NOT NULL)")
    applied = {row[0] for row in conn.execute("SELECT id FROM schema_migrations")}
    pending = [(name, script) for name, script in MIGRATIONS if name not in applied]
    for name, script in pending:
        conn.executescript(script)
        with conn:
            conn.execute("INSERT INTO schema_migrations VALUES (?, ?)",
                         (name, datetime.now().isoformat()))
    return len(pending)