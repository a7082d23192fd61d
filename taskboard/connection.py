"""Opening the task board database from the environment."""

from __future__ import annotations

import os
import sqlite3
from typing import Optional

from dotenv import find_dotenv, load_dotenv

_SCHEME = "sqlite://"


class ConnectionError_(Exception):
    """The database could not be located or opened."""


def database_path(url: str) -> str:
    """Turn a database URL into the path handed to SQLite."""
    path = url[len(_SCHEME):] if url.startswith(_SCHEME) else url
    if not path:
        raise ConnectionError_(f"Invalid database URL: {url!r}")
    return path


def establish_connection(database_url: Optional[str] = None) -> sqlite3.Connection:
    """Open the database named by ``database_url`` or by DATABASE_URL."""
    if database_url is None:
        load_dotenv(find_dotenv(usecwd=True))
        database_url = os.environ.get("DATABASE_URL")
        if database_url is None:
            raise ConnectionError_("DATABASE_URL must be set")

    print(f"Connecting to database at: {database_url}")
    path = database_path(database_url)
    try:
        return sqlite3.connect(path, uri=path.startswith("file:"))
    except sqlite3.Error as exc:
        raise ConnectionError_(f"Error connecting to {database_url}") from exc