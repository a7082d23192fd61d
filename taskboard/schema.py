"""SQLite table definitions for the task board database."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass


@dataclass(frozen=True)
class Column:
    """One column of a table."""

    name: str
    sql_type: str
    nullable: bool = False
    references: str | None = None
    primary_key: bool = False

    def definition(self) -> str:
        parts = [self.name, self.sql_type]
        if self.primary_key:
            parts.append("PRIMARY KEY")
        elif not self.nullable:
            parts.append("NOT NULL")
        if self.references:
            parts.append(f"REFERENCES {self.references} (id)")
        return " ".join(parts)


def _id() -> Column:
    return Column("id", "INTEGER", primary_key=True)


def _fk(name: str, table: str) -> Column:
    return Column(name, "INTEGER", references=table)


TABLES: dict[str, tuple[Column, ...]] = {
    "task_statuses": (_id(), Column("name", "TEXT")),
    "users": (
        _id(),
        Column("name", "TEXT"),
        Column("email", "TEXT"),
        Column("active", "BOOLEAN"),
    ),
    "tasks": (
        _id(),
        Column("title", "TEXT"),
        Column("description", "TEXT", nullable=True),
        _fk("status_id", "task_statuses"),
    ),
    "user_tasks": (
        _id(),
        _fk("user_id", "users"),
        _fk("task_id", "tasks"),
        _fk("status_id", "task_statuses"),
    ),
}


def _table_ddl(table: str, columns: tuple[Column, ...]) -> str:
    body = ", ".join(column.definition() for column in columns)
    return f"CREATE TABLE IF NOT EXISTS {table} ({body})"


def create_schema(conn: sqlite3.Connection) -> None:
    """Create every table that does not exist yet."""
    with conn:
        for table, columns in TABLES.items():
            conn.execute(_table_ddl(table, columns))