"""Queries on the users table."""

from __future__ import annotations

import sqlite3

from .models import NewUser, User

_COLUMNS = "id, name, email, active"


def insert_user(conn: sqlite3.Connection, new_user: NewUser) -> int:
    """Insert a user and return the number of rows written."""
    with conn:
        cursor = conn.execute(
            "INSERT INTO users (name, email, active) VALUES (?, ?, ?)",
            (new_user.name, new_user.email, new_user.active),
        )
    return cursor.rowcount


def load_users(conn: sqlite3.Connection, limit: int) -> list[User]:
    """Return at most ``limit`` users."""
    rows = conn.execute(f"SELECT {_COLUMNS} FROM users LIMIT ?", (limit,))
    return [User.from_row(row) for row in rows]


def set_active_by_name(conn: sqlite3.Connection, name: str, active: bool) -> int:
    """Set ``active`` on every user called ``name``; return the count changed."""
    with conn:
        cursor = conn.execute(
            "UPDATE users SET active = ? WHERE name = ?", (active, name)
        )
    return cursor.rowcount


def first_user_by_name(conn: sqlite3.Connection, name: str) -> User:
    """Return the first user called ``name``; raise LookupError if none."""
    row = conn.execute(
        f"SELECT {_COLUMNS} FROM users WHERE name = ? LIMIT 1", (name,)
    ).fetchone()
    if row is None:
        raise LookupError(f"No user named {name!r}")
    return User.from_row(row)


def delete_users_by_name(conn: sqlite3.Connection, name: str) -> int:
    """Delete every user called ``name``; return the count deleted."""
    with conn:
        cursor = conn.execute("DELETE FROM users WHERE name = ?", (name,))
    return cursor.rowcount