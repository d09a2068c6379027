"""A Flask and SQLite HTTP API for managing books and categories behind basic authentication."""

__version__ = "0.1.0"