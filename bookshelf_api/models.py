"""Records stored by the service and their JSON representations."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from datetime import datetime
from typing import Any, Optional, Sequence


def _to_json(record: Any) -> dict[str, Any]:
    return {k: v.isoformat() if isinstance(v, datetime) else v for k, v in asdict(record).items()}


def _from_row(cls: type, row: Sequence[Any]) -> dict[str, Any]:
    names = [f.name for f in fields(cls)]
    values = tuple(row)
    if len(values) != len(names):
        raise ValueError(f"expected {len(names)} columns, got {len(values)}")
    result = dict(zip(names, values))
    for name in ("created_at", "modified_at"):
        if result[name] is not None and not isinstance(result[name], datetime):
            result[name] = datetime.fromisoformat(str(result[name]))
    return result


@dataclass
class Book:
    """A book row."""

    id: int = 0
    title: str = ""
    description: str = ""
    image_url: str = ""
    release_year: int = 0
    price: int = 0
    total_page: int = 0
    thickness: str = ""
    category_id: int = 0
    created_at: Optional[datetime] = None
    created_by: str = ""
    modified_at: Optional[datetime] = None
    modified_by: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _to_json(self)

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "Book":
        """Build a book from a full row of the books table."""
        return cls(**_from_row(cls, row))


@dataclass
class Category:
    """A category row."""

    id: int = 0
    name: str = ""
    created_at: Optional[datetime] = None
    created_by: str = ""
    modified_at: Optional[datetime] = None
    modified_by: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _to_json(self)

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "Category":
        """Build a category from a row; the stored modifier is reported as ``created_by``."""
        values = _from_row(cls, row)
        values["created_by"], values["modified_by"] = values["modified_by"], ""
        return cls(**values)


@dataclass
class User:
    """A user row; the password is never serialised."""

    id: int = 0
    username: str = ""
    password: str = ""
    created_at: Optional[datetime] = None
    created_by: str = ""
    modified_at: Optional[datetime] = None
    modified_by: str = ""

    def to_dict(self) -> dict[str, Any]:
        result = _to_json(self)
        del result["password"]
        return result