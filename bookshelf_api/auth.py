"""Credential checking for API requests."""

from __future__ import annotations

import sqlite3
from datetime import datetime

ADMIN = "admin"


class AuthError(Exception):
    """Raised when a request may not proceed; carries the HTTP status."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message


def authenticate(conn: sqlite3.Connection, username, password) -> str:
    """Check credentials (``None`` when absent) and record the user on first login."""
    if username is None or password is None:
        raise AuthError(401, "Username dan Password empty")
    if username != ADMIN or password != ADMIN:
        raise AuthError(401, "Unauthorized")
    try:
        row = conn.execute("SELECT id FROM users WHERE username = ?", (username,)).fetchone()
    except sqlite3.Error:
        row = None
    if row is None:
        now = datetime.now().isoformat()
        try:
            with conn:
                conn.execute(
                    "INSERT INTO users (username, password, created_at, created_by,"
                    " modified_at, modified_by) VALUES (?, ?, ?, ?, ?, ?)",
                    (username, password, now, username, now, username),
                )
        except sqlite3.Error as exc:
            raise AuthError(500, "Error to save users") from exc
    return username