import pytest

from bookshelf_api.books import (
    create_book,
    delete_book,
    get_book,
    list_books,
    thickness_for,
)
from bookshelf_api.database import connect, migrate


@pytest.fixture
def conn():
    connection = connect(":memory:")
    migrate(connection)
    yield connection
    connection.close()


def test_thickness_boundaries():
    assert thickness_for(99) == "tipis"
    assert thickness_for(100) == "tebal"
    assert thickness_for(0) == "tipis"


def test_create_book_fills_server_fields(conn):
    book = create_book(conn, {"title": "Laut", "total_page": 250}, "alice")
    assert book.id >= 1
    assert book.title == "Laut"
    assert book.thickness == "tebal"
    assert book.created_by == "alice"
    assert book.modified_by == "alice"
    assert book.created_at == book.modified_at


def test_category_id_increments(conn):
    first = create_book(conn, {"title": "a"}, "alice")
    second = create_book(conn, {"title": "b"}, "alice")
    assert first.category_id == 1
    assert second.category_id == first.category_id + 1


def test_payload_server_fields_are_overridden(conn):
    book = create_book(
        conn,
        {"id": 77, "thickness": "tebal", "category_id": 40, "total_page": 10},
        "alice",
    )
    assert book.id != 77 or get_book(conn, 77) == book
    assert book.thickness == "tipis"
    assert book.category_id == 1


def test_round_trip_through_storage(conn):
    book = create_book(
        conn,
        {
            "title": "Bumi",
            "description": "novel",
            "image_url": "http://example.com/x.png",
            "release_year": 2005,
            "price": 50000,
            "total_page": 120,
        },
        "alice",
    )
    assert get_book(conn, book.id) == book


def test_release_year_is_not_restricted(conn):
    book = create_book(conn, {"release_year": 1900}, "alice")
    assert get_book(conn, book.id).release_year == 1900


def test_keys_match_case_insensitively(conn):
    book = create_book(conn, {"TITLE": "Upper"}, "alice")
    assert book.title == "Upper"


def test_null_payload_creates_empty_book(conn):
    book = create_book(conn, None, "alice")
    assert book.title == ""
    assert book.thickness == "tipis"


@pytest.mark.parametrize(
    "payload",
    [
        {"title": 5},
        {"price": "10"},
        {"price": True},
        {"total_page": 1.5},
        {"created_at": "yesterday"},
        ["title"],
        "title",
    ],
)
def test_invalid_payload_raises(conn, payload):
    with pytest.raises(ValueError):
        create_book(conn, payload, "alice")
    assert list_books(conn) == []


def test_list_books_in_insertion_order(conn):
    titles = ["one", "two", "three"]
    created = [create_book(conn, {"title": t}, "alice") for t in titles]
    assert list_books(conn) == created


def test_get_missing_book(conn):
    assert get_book(conn, 42) is None


def test_delete_book(conn):
    book = create_book(conn, {"title": "gone"}, "alice")
    assert delete_book(conn, book.id) is True
    assert get_book(conn, book.id) is None
    assert delete_book(conn, book.id) is False