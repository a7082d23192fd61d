import sqlite3

import pytest

from taskboard.models import Task, TaskStatus, UserTask
from taskboard.operations import (
    CrudOperations,
    TaskOperations,
    TaskStatusOperations,
    UserTaskOperations,
)
from taskboard.schema import create_schema


@pytest.fixture
def conn():
    connection = sqlite3.connect(":memory:")
    create_schema(connection)
    yield connection
    connection.close()


def test_crud_operations_is_abstract():
    with pytest.raises(TypeError):
        CrudOperations()


def test_task_crud_cycle(conn):
    ops = TaskOperations()
    ops.create(
        conn,
        Task(
            id=0,
            title="Complete Rust ORM",
            description="Working with Diesel and SQLite",
            status_id=1,
        ),
    )
    assert ops.read_all(conn) == [
        Task(
            id=1,
            title="Complete Rust ORM",
            description="Working with Diesel and SQLite",
            status_id=1,
        )
    ]

    ops.update(
        conn,
        1,
        Task(
            id=1,
            title="Updated Task Title",
            description="Updated description",
            status_id=1,
        ),
    )
    (task,) = ops.read_all(conn)
    assert task.title == "Updated Task Title"
    assert task.description == "Working with Diesel and SQLite"

    ops.delete(conn, 1)
    assert ops.read_all(conn) == []


def test_task_with_no_description(conn):
    ops = TaskOperations()
    ops.create(conn, Task(id=0, title="t", description=None, status_id=2))
    assert ops.read_all(conn)[0].description is None


def test_task_status_crud_cycle(conn):
    ops = TaskStatusOperations()
    ops.create(conn, TaskStatus(id=0, name="Pending"))
    assert ops.read_all(conn) == [TaskStatus(id=1, name="Pending")]

    ops.update(conn, 1, TaskStatus(id=1, name="In Progress"))
    assert ops.read_all(conn) == [TaskStatus(id=1, name="In Progress")]

    ops.delete(conn, 1)
    assert ops.read_all(conn) == []


def test_update_missing_id_changes_nothing(conn):
    ops = TaskStatusOperations()
    ops.create(conn, TaskStatus(id=0, name="Pending"))
    ops.update(conn, 99, TaskStatus(id=99, name="Done"))
    ops.delete(conn, 99)
    assert ops.read_all(conn) == [TaskStatus(id=1, name="Pending")]


def test_user_task_create_needs_status(conn):
    ops = UserTaskOperations()
    with pytest.raises(sqlite3.IntegrityError):
        ops.create(conn, UserTask(id=0, user_id=1, task_id=2, status_id=1))
    assert ops.read_all(conn) == []


def test_user_task_update_and_delete(conn):
    with conn:
        conn.execute(
            "INSERT INTO user_tasks (user_id, task_id, status_id) VALUES (3, 4, 7)"
        )
    ops = UserTaskOperations()
    ops.update(conn, 1, UserTask(id=1, user_id=1, task_id=2, status_id=1))
    assert ops.read_all(conn) == [UserTask(id=1, user_id=1, task_id=2, status_id=7)]

    ops.delete(conn, 1)
    assert ops.read_all(conn) == []