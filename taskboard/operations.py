"""Create, read, update and delete for tasks, statuses and assignments."""

from __future__ import annotations

import sqlite3
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from .models import Task, TaskStatus, UserTask

T = TypeVar("T")


class CrudOperations(ABC, Generic[T]):
    """CRUD operations over one table."""

    @abstractmethod
    def create(self, conn: sqlite3.Connection, new_item: T) -> None:
        """Insert ``new_item``; its id is ignored."""

    @abstractmethod
    def read_all(self, conn: sqlite3.Connection) -> list[T]:
        """Return every row of the table."""

    @abstractmethod
    def update(self, conn: sqlite3.Connection, item_id: int, update_data: T) -> None:
        """Update the row with ``item_id`` from ``update_data``."""

    @abstractmethod
    def delete(self, conn: sqlite3.Connection, item_id: int) -> None:
        """Delete the row with ``item_id``."""


def _execute(conn: sqlite3.Connection, sql: str, params: tuple[Any, ...]) -> None:
    with conn:
        conn.execute(sql, params)


class TaskOperations(CrudOperations[Task]):
    """CRUD for the tasks table."""

    def create(self, conn: sqlite3.Connection, new_item: Task) -> None:
        _execute(
            conn,
            "INSERT INTO tasks (title, description, status_id) VALUES (?, ?, ?)",
            (new_item.title, new_item.description, new_item.status_id),
        )

    def read_all(self, conn: sqlite3.Connection) -> list[Task]:
        rows = conn.execute(
            "SELECT id, title, description, status_id FROM tasks ORDER BY id"
        )
        return [Task.from_row(row) for row in rows]

    def update(self, conn: sqlite3.Connection, item_id: int, update_data: Task) -> None:
        """Change the title only."""
        _execute(
            conn, "UPDATE tasks SET title = ? WHERE id = ?", (update_data.title, item_id)
        )

    def delete(self, conn: sqlite3.Connection, item_id: int) -> None:
        _execute(conn, "DELETE FROM tasks WHERE id = ?", (item_id,))


class TaskStatusOperations(CrudOperations[TaskStatus]):
    """CRUD for the task_statuses table."""

    def create(self, conn: sqlite3.Connection, new_item: TaskStatus) -> None:
        _execute(conn, "INSERT INTO task_statuses (name) VALUES (?)", (new_item.name,))

    def read_all(self, conn: sqlite3.Connection) -> list[TaskStatus]:
        rows = conn.execute("SELECT id, name FROM task_statuses ORDER BY id")
        return [TaskStatus.from_row(row) for row in rows]

    def update(
        self, conn: sqlite3.Connection, item_id: int, update_data: TaskStatus
    ) -> None:
        _execute(
            conn,
            "UPDATE task_statuses SET name = ? WHERE id = ?",
            (update_data.name, item_id),
        )

    def delete(self, conn: sqlite3.Connection, item_id: int) -> None:
        _execute(conn, "DELETE FROM task_statuses WHERE id = ?", (item_id,))


class UserTaskOperations(CrudOperations[UserTask]):
    """CRUD for the user_tasks table."""

    def create(self, conn: sqlite3.Connection, new_item: UserTask) -> None:
        """Insert user and task ids; the status is left to the database."""
        _execute(
            conn,
            "INSERT INTO user_tasks (user_id, task_id) VALUES (?, ?)",
            (new_item.user_id, new_item.task_id),
        )

    def read_all(self, conn: sqlite3.Connection) -> list[UserTask]:
        rows = conn.execute(
            "SELECT id, user_id, task_id, status_id FROM user_tasks ORDER BY id"
        )
        return [UserTask.from_row(row) for row in rows]

    def update(
        self, conn: sqlite3.Connection, item_id: int, update_data: UserTask
    ) -> None:
        """Change the user and task ids; the status is kept."""
        _execute(
            conn,
            "UPDATE user_tasks SET user_id = ?, task_id = ? WHERE id = ?",
            (update_data.user_id, update_data.task_id, item_id),
        )

    def delete(self, conn: sqlite3.Connection, item_id: int) -> None:
        _execute(conn, "DELETE FROM user_tasks WHERE id = ?", (item_id,))