"""Row types for the task board tables."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class User:
    """A stored user."""

    id: int
    name: str
    email: str
    active: bool

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "User":
        """Build from a (id, name, email, active) row."""
        id_, name, email, active = row
        return cls(id=int(id_), name=name, email=email, active=bool(active))


@dataclass(frozen=True)
class NewUser:
    """A user ready for insertion."""

    name: str
    email: str
    active: bool


@dataclass(frozen=True)
class Task:
    """A stored task."""

    id: int
    title: str
    description: Optional[str]
    status_id: int

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "Task":
        """Build from a (id, title, description, status_id) row."""
        id_, title, description, status_id = row
        return cls(
            id=int(id_), title=title, description=description, status_id=int(status_id)
        )


@dataclass(frozen=True)
class NewTask:
    """A task ready for insertion."""

    title: str
    description: Optional[str]
    status_id: int


@dataclass(frozen=True)
class UserTask:
    """An assignment of a task to a user."""

    id: int
    user_id: int
    task_id: int
    status_id: int

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "UserTask":
        """Build from a (id, user_id, task_id, status_id) row."""
        id_, user_id, task_id, status_id = row
        return cls(
            id=int(id_),
            user_id=int(user_id),
            task_id=int(task_id),
            status_id=int(status_id),
        )


@dataclass(frozen=True)
class NewUserTask:
    """An assignment ready for insertion."""

    user_id: int
    task_id: int


@dataclass(frozen=True)
class TaskStatus:
    """A named task status."""

    id: int
    name: str

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "TaskStatus":
        """Build from an (id, name) row."""
        id_, name = row
        return cls(id=int(id_), name=name)


@dataclass(frozen=True)
class NewTaskStatus:
    """A status ready for insertion."""

    name: str