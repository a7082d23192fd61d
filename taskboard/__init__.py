"""SQLite-backed users, tasks, task statuses and assignments with CRUD operations and a user listing command."""

__version__ = "0.1.0"