"""Storage operations for categories."""

from __future__ import annotations

import sqlite3
from datetime import datetime
from typing import Any, Optional

from .books import _bind
from .models import Category

_CATEGORY_FIELDS: dict[str, type] = {
    "id": int,
    "name": str,
    "created_at": datetime,
    "created_by": str,
    "modified_at": datetime,
    "modified_by": str,
}


def create_category(conn: sqlite3.Connection, payload: Any, username: str) -> Category:
    """Store a new category built from a decoded JSON payload and return it.

    Raises ValueError when the payload does not fit the category fields.
    """
    fields = _bind(payload, _CATEGORY_FIELDS)
    now = datetime.now()
    category = Category(
        name=fields.get("name", ""),
        created_at=now,
        created_by=username,
        modified_at=now,
        modified_by=username,
    )
    with conn:
        cursor = conn.execute(
            "INSERT INTO categories (name, created_at, created_by, modified_at,"
            " modified_by) VALUES (?, ?, ?, ?, ?)",
            (category.name, now.isoformat(), username, now.isoformat(), username),
        )
    category.id = cursor.lastrowid
    return category


def list_categories(conn: sqlite3.Connection) -> list[Category]:
    """Return every stored category."""
    return [Category.from_row(row) for row in conn.execute("SELECT * FROM categories")]


def get_category(conn: sqlite3.Connection, category_id: int) -> Optional[Category]:
    """Return the category with ``category_id``, or ``None`` if there is none."""
    row = conn.execute(
        "SELECT * FROM categories WHERE id = ?", (category_id,)
    ).fetchone()
    return None if row is None else Category.from_row(row)


def delete_category(conn: sqlite3.Connection, category_id: int) -> bool:
    """Delete the category with ``category_id``; return whether one was deleted."""
    with conn:
        cursor = conn.execute("DELETE FROM categories WHERE id = ?", (category_id,))
    return cursor.rowcount > 0