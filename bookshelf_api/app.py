"""HTTP application exposing the books and categories API."""

from __future__ import annotations

import argparse
import json
import os
import re
import sqlite3
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask, abort, g, jsonify, request

from .auth import AuthError, authenticate
from .books import create_book, delete_book, get_book, list_books
from .categories import create_category, delete_category, get_category, list_categories
from .database import connect, migrate


def _parse_id(text: str) -> int:
    if not re.fullmatch(r"[+-]?[0-9]+", text) or not -(2**63) <= int(text) < 2**63:
        abort(500)
    return int(text)


def _read_json():
    return json.loads(request.get_data(as_text=True))


def create_app(conn: sqlite3.Connection) -> Flask:
    """Build the application serving requests from ``conn``."""
    app = Flask(__name__)

    @app.errorhandler(AuthError)
    def _auth_failed(exc: AuthError):
        return jsonify({"error": exc.message}), exc.status

    @app.errorhandler(sqlite3.Error)
    def _database_failed(exc: sqlite3.Error):
        return jsonify({"error": str(exc)}), 500

    @app.before_request
    def _require_auth():
        if request.url_rule is None:
            return
        auth = request.authorization
        if auth is None or auth.type != "basic":
            g.username = authenticate(conn, None, None)
        else:
            g.username = authenticate(conn, auth.username, auth.password)

    @app.post("/api/books")
    def post_book():
        try:
            book = create_book(conn, _read_json(), g.username)
        except ValueError:
            return "", 400
        return jsonify({"books": book.to_dict()})

    @app.get("/api/books")
    def get_books():
        return jsonify({"books": [b.to_dict() for b in list_books(conn)] or None})

    @app.get("/api/books/<book_id>")
    def get_book_by_id(book_id: str):
        book = get_book(conn, _parse_id(book_id))
        if book is None:
            return jsonify({"error": "the book you search does not exist"}), 404
        return jsonify({"books": book.to_dict()})

    @app.delete("/api/books/<book_id>")
    def delete_book_by_id(book_id: str):
        body_error = None
        try:
            payload = _read_json()
            if payload is not None and not isinstance(payload, dict):
                raise ValueError("request body must be a JSON object")
        except ValueError as exc:
            body_error = str(exc)
        deleted = delete_book(conn, _parse_id(book_id))
        if body_error is not None:
            return jsonify({"error": body_error}), 502
        if not deleted:
            return jsonify({"error": "The book you want to delete does not exist"}), 404
        return jsonify({"data": "data has deleted"})

    @app.post("/api/categories")
    def post_category():
        try:
            category = create_category(conn, _read_json(), g.username)
        except ValueError:
            return "", 400
        return jsonify({"categories": category.to_dict()})

    @app.get("/api/categories")
    def get_categories():
        return jsonify({"categories": [c.to_dict() for c in list_categories(conn)] or None})

    @app.get("/api/categories/<category_id>")
    def get_category_by_id(category_id: str):
        category = get_category(conn, _parse_id(category_id))
        if category is None:
            return jsonify({"error": "The category you search does not exist"}), 404
        return jsonify({"categories": category.to_dict()})

    @app.delete("/api/categories/<category_id>")
    def delete_category_by_id(category_id: str):
        if not delete_category(conn, _parse_id(category_id)):
            return jsonify({"error": "The category you want to delete does not exist"}), 404
        return jsonify({"data": "data succesfully deleted"})

    return app


def main(argv=None) -> int:
    """Load configuration, migrate the database and serve the API."""
    parser = argparse.ArgumentParser(description="Serve the bookshelf API.")
    parser.add_argument("--env-file", default="config/.env")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)

    if not Path(args.env_file).is_file():
        raise RuntimeError("error load .env")
    load_dotenv(args.env_file)

    conn = connect(os.environ.get("DATABASE_PATH", "bookshelf.db"))
    try:
        conn.execute("SELECT 1").fetchone()
        print("successfully connected to database")
        print("Migration success, applied", migrate(conn), "migrations!")
        create_app(conn).run(host=args.host, port=args.port)
    finally:
        conn.close()
    return 0