# bookshelf-api

A small JSON-over-HTTP service for keeping track of books and the
categories they belong to. It is built on Flask and keeps its data in a
SQLite file.

Every request has to carry HTTP Basic credentials for the built-in
administrator account, whose user name is `admin` (the expected
credentials are defined by `ADMIN` in `bookshelf_api.auth`). The first
time that account signs in, it is recorded in the `users` table.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running the server

The server reads its settings from an env file, which must exist.
By default it is `config/.env`. One setting is read from it:

```
DATABASE_PATH=bookshelf.db
```

`DATABASE_PATH` is the SQLite file to use. If it is not set, the server
uses `bookshelf.db` in the current directory. If the env file is
missing, the command stops with `RuntimeError: error load .env`.

Start the server with:

```
bookshelf-api
```

The command takes these options:

| Option       | Default       | Meaning                     |
|--------------|---------------|-----------------------------|
| `--env-file` | `config/.env` | env file to load            |
| `--host`     | `0.0.0.0`     | address to listen on        |
| `--port`     | `8080`        | port to listen on           |

Before it serves any request, the server applies any schema migrations
that are still pending. It then prints how many it applied.

## Endpoints

| Method | Path                   | What it does                    |
|--------|------------------------|---------------------------------|
| POST   | `/api/books`           | add a book                      |
| GET    | `/api/books`           | list every book                 |
| GET    | `/api/books/<id>`      | fetch one book                  |
| DELETE | `/api/books/<id>`      | remove a book                   |
| POST   | `/api/categories`      | add a category                  |
| GET    | `/api/categories`      | list every category             |
| GET    | `/api/categories/<id>` | fetch one category              |
| DELETE | `/api/categories/<id>` | remove a category               |

Responses:

* No Basic credentials: `401` with `{"error": "Username dan Password empty"}`.
* Wrong credentials: `401` with `{"error": "Unauthorized"}`.
* A body that is not valid JSON, or that does not fit the record's fields,
  on a POST: `400` with an empty body.
* An id that does not exist: `404` with an `error` message.
* An id that is not an integer: `500`.
* A list endpoint with nothing stored: `{"books": null}` or
  `{"categories": null}`.
* On a book DELETE, a body that is not a JSON object still lets the
  deletion go ahead, but the response is `502` with an `error` message.

Timestamps are returned as ISO 8601 strings.

### Books

A book is sent and returned with these fields: `id`, `title`,
`description`, `image_url`, `release_year`, `price`, `total_page`,
`thickness`, `category_id`, `created_at`, `created_by`, `modified_at`
and `modified_by`. Field names in the request body are matched without
regard to case. Unknown keys and `null` values are ignored.

The server fills in some of these fields itself:

* `thickness` is `"tipis"` when `total_page` is below 100, and `"tebal"`
  otherwise.
* `category_id` is one more than the highest `category_id` among the
  stored books.
* The `created_*` and `modified_*` fields record when the book was added
  and the name of the user who added it.

### Categories

A category has `id`, `name`, `created_at`, `created_by`, `modified_at`
and `modified_by`. Only `name` has to be sent. The server fills in the
rest. When categories are read back from storage, the stored
`modified_by` is reported as `created_by`, and `modified_by` is empty.

## Using it as a library

The same operations are available without HTTP:

```python
from bookshelf_api.database import connect, migrate
from bookshelf_api.books import create_book, get_book, list_books, thickness_for
from bookshelf_api.categories import create_category, list_categories
from bookshelf_api.app import create_app

conn = connect("bookshelf.db")
migrate(conn)                  # returns the number of migrations applied

create_category(conn, {"name": "Fiction"}, "admin")
book = create_book(conn, {"title": "Dune", "total_page": 412, "release_year": 1990}, "admin")
print(book.thickness)          # "tebal"
print(thickness_for(80))       # "tipis"
print(get_book(conn, 9999))    # None

app = create_app(conn)         # a Flask application serving the endpoints above
```

`create_book` and `create_category` raise `ValueError` when the payload
does not fit the record's fields. `delete_book` and `delete_category`
return whether a row was removed. `bookshelf_api.auth.authenticate`
raises `AuthError`, which carries the HTTP `status` and `message`.

The `Book`, `Category` and `User` records live in `bookshelf_api.models`.
Each of them has a `to_dict()` method that gives the JSON shape the API
returns. `User.to_dict()` leaves out the password. `Book.from_row` and
`Category.from_row` build a record from a full table row.

## What it does not do

* Data lives only in a local SQLite file. No separate database server
  is supported.
* There are no endpoints that update a book or a category. There are
  none for managing users.
* Only the one built-in account can sign in. Its password is stored as
  given, not hashed.
* The server is Flask's built-in development server.