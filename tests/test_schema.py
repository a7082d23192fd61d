import sqlite3

import pytest

from taskboard.schema import create_schema


@pytest.fixture
def conn():
    connection = sqlite3.connect(":memory:")
    yield connection
    connection.close()


def _tables(conn):
    rows = conn.execute(
        "SELECT name FROM sqlite_master WHERE type = 'table'"
    ).fetchall()
    return {name for (name,) in rows}


def _columns(conn, table):
    return {row[1]: row for row in conn.execute(f"PRAGMA table_info({table})")}


def test_creates_all_tables(conn):
    create_schema(conn)
    assert _tables(conn) == {"users", "tasks", "user_tasks", "task_statuses"}


def test_is_idempotent(conn):
    create_schema(conn)
    create_schema(conn)
    assert _tables(conn) == {"users", "tasks", "user_tasks", "task_statuses"}


@pytest.mark.parametrize(
    "table, columns",
    [
        ("users", ["id", "name", "email", "active"]),
        ("tasks", ["id", "title", "description", "status_id"]),
        ("user_tasks", ["id", "user_id", "task_id", "status_id"]),
        ("task_statuses", ["id", "name"]),
    ],
)
def test_column_names(conn, table, columns):
    create_schema(conn)
    assert list(_columns(conn, table)) == columns


def test_task_description_is_nullable(conn):
    create_schema(conn)
    cols = _columns(conn, "tasks")
    assert cols["description"][3] == 0
    assert cols["title"][3] == 1


def test_existing_rows_survive_second_call(conn):
    create_schema(conn)
    with conn:
        conn.execute("INSERT INTO task_statuses (name) VALUES ('Pending')")
    create_schema(conn)
    assert conn.execute("SELECT name FROM task_statuses").fetchall() == [("Pending",)]