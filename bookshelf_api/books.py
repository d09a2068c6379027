"""Storage operations for books."""

from __future__ import annotations

import sqlite3
from datetime import datetime
from typing import Any, Optional

from .models import Book

_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1

THIN_PAGE_LIMIT = 100

_BOOK_FIELDS: dict[str, type] = {
    "id": int,
    "title": str,
    "description": str,
    "image_url": str,
    "release_year": int,
    "price": int,
    "total_page": int,
    "thickness": str,
    "category_id": int,
    "created_at": datetime,
    "created_by": str,
    "modified_at": datetime,
    "modified_by": str,
}


def _convert(key: str, kind: type, value: Any) -> Any:
    if kind is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"field {key!r} must be an integer")
        if not _INT_MIN <= value <= _INT_MAX:
            raise ValueError(f"field {key!r} is out of range")
        return value
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    if kind is str:
        return value
    text = value[:-1] + "+00:00" if value[-1:] in ("Z", "z") else value
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise ValueError(f"field {key!r} must be an RFC 3339 timestamp") from exc


def _bind(payload: Any, kinds: dict[str, type]) -> dict[str, Any]:
    """Check a decoded JSON payload against field kinds and return known fields.

    Keys match field names case-insensitively; unknown keys and nulls are
    ignored. A payload of ``None`` binds to no fields.
    """
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValueError("request body must be a JSON object")
    values: dict[str, Any] = {}
    for key, value in payload.items():
        name = key.lower()
        kind = kinds.get(name)
        if kind is None or value is None:
            continue
        values[name] = _convert(key, kind, value)
    return values


def thickness_for(total_page: int) -> str:
    """Classify a book as thin ("tipis") or thick ("tebal") by its page count."""
    if total_page < THIN_PAGE_LIMIT:
        return "tipis"
    return "tebal"


def create_book(conn: sqlite3.Connection, payload: Any, username: str) -> Book:
    """Store a new book built from a decoded JSON payload and return it.

    Raises ValueError when the payload does not fit the book fields.
    """
    fields = _bind(payload, _BOOK_FIELDS)
    try:
        row = conn.execute("SELECT COALESCE(MAX(category_id), 0) FROM books").fetchone()
    except sqlite3.Error as exc:
        raise sqlite3.DatabaseError("Failed to get max category_id") from exc

    now = datetime.now()
    total_page = fields.get("total_page", 0)
    book = Book(
        title=fields.get("title", ""),
        description=fields.get("description", ""),
        image_url=fields.get("image_url", ""),
        release_year=fields.get("release_year", 0),
        price=fields.get("price", 0),
        total_page=total_page,
        thickness=thickness_for(total_page),
        category_id=row[0] + 1,
        created_at=now,
        created_by=username,
        modified_at=now,
        modified_by=username,
    )
    with conn:
        cursor = conn.execute(
            "INSERT INTO books (title, description, image_url, release_year, price,"
            " total_page, thickness, category_id, created_at, created_by,"
            " modified_at, modified_by) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
            (
                book.title,
                book.description,
                book.image_url,
                book.release_year,
                book.price,
                book.total_page,
                book.thickness,
                book.category_id,
                now.isoformat(),
                book.created_by,
                now.isoformat(),
                book.modified_by,
            ),
        )
    book.id = cursor.lastrowid
    return book


def list_books(conn: sqlite3.Connection) -> list[Book]:
    """Return every stored book."""
    return [Book.from_row(row) for row in conn.execute("SELECT * FROM books")]


def get_book(conn: sqlite3.Connection, book_id: int) -> Optional[Book]:
    """Return the book with ``book_id``, or ``None`` if there is none."""
    row = conn.execute("SELECT * FROM books WHERE id = ?", (book_id,)).fetchone()
    return None if row is None else Book.from_row(row)


def delete_book(conn: sqlite3.Connection, book_id: int) -> bool:
    """Delete the book with ``book_id``; return whether one was deleted."""
    with conn:
        cursor = conn.execute("DELETE FROM books WHERE id = ?", (book_id,))
    return cursor.rowcount > 0