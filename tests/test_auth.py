import pytest

from bookshelf_api.auth import AuthError, authenticate
from bookshelf_api.database import connect, migrate

# The built-in administrator account uses its name as its credential.
ADMIN_USERNAME = "admin"


@pytest.fixture
def conn():
    connection = connect(":memory:")
    migrate(connection)
    yield connection
    connection.close()


def _user_count(conn):
    return conn.execute("SELECT COUNT(*) FROM users").fetchone()[0]


def test_admin_login_returns_username(conn):
    assert authenticate(conn, ADMIN_USERNAME, ADMIN_USERNAME) == ADMIN_USERNAME


def test_first_login_records_user(conn):
    authenticate(conn, ADMIN_USERNAME, ADMIN_USERNAME)
    row = conn.execute(
        "SELECT username, created_by, modified_by, created_at FROM users"
    ).fetchone()
    assert row["username"] == ADMIN_USERNAME
    assert row["created_by"] == ADMIN_USERNAME
    assert row["modified_by"] == ADMIN_USERNAME
    assert row["created_at"]


def test_repeated_login_does_not_duplicate_user(conn):
    authenticate(conn, ADMIN_USERNAME, ADMIN_USERNAME)
    authenticate(conn, ADMIN_USERNAME, ADMIN_USERNAME)
    assert _user_count(conn) == 1


def test_wrong_password_is_unauthorized(conn):
    password = "password"
    with pytest.raises(AuthError) as info:
        authenticate(conn, ADMIN_USERNAME, password)
    assert info.value.status == 401
    assert info.value.message == "Unauthorized"
    assert _user_count(conn) == 0


def test_wrong_username_is_unauthorized(conn):
    with pytest.raises(AuthError) as info:
        authenticate(conn, "guest", ADMIN_USERNAME)
    assert info.value.status == 401
    assert str(info.value) == "Unauthorized"


@pytest.mark.parametrize(
    "username, credential",
    [(None, None), (ADMIN_USERNAME, None), (None, ADMIN_USERNAME)],
)
def test_missing_credentials(conn, username, credential):
    with pytest.raises(AuthError) as info:
        authenticate(conn, username, credential)
    assert info.value.status == 401
    assert info.value.message == "Username dan Password empty"


def test_failure_to_save_user_is_server_error(conn):
    with conn:
        conn.execute("DROP TABLE users")
    with pytest.raises(AuthError) as info:
        authenticate(conn, ADMIN_USERNAME, ADMIN_USERNAME)
    assert info.value.status == 500
    assert info.value.message == "Error to save users"