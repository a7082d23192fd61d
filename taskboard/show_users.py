"""Print the first few users in the database."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from typing import Optional, Sequence

from .connection import ConnectionError_, establish_connection
from .models import User
from .users import load_users

_RULE = "-----------"
_LIMIT = 5


def format_user(user: User) -> str:
    """Render one user as the lines the listing prints."""
    return "\n".join(
        [
            f"Name: {user.name}",
            f"Email: {user.email}",
            f"Active: {str(user.active).lower()}",
        ]
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """List up to five users from the database named by DATABASE_URL."""
    parser = argparse.ArgumentParser(prog="show-users", description=main.__doc__)
    parser.parse_args(argv)

    print("Requesting connection...")
    try:
        conn = establish_connection()
    except ConnectionError_ as exc:
        print(exc, file=sys.stderr)
        return 1
    print("Received connection...")

    print("Querying users...")
    try:
        with conn:
            results = load_users(conn, _LIMIT)
    except sqlite3.Error as exc:
        print(f"Error loading users: {exc}", file=sys.stderr)
        return 1
    finally:
        conn.close()

    print(f"Displaying {len(results)} users")
    for user in results:
        print(_RULE)
        print(format_user(user))
    print(_RULE)
    return 0


if __name__ == "__main__":
    sys.exit(main())