# taskboard

A small SQLite data layer for users, tasks, task statuses and the assignments
that link users to tasks, with a command that lists users.

## Installation

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Configuration

`taskboard.connection.establish_connection()` called without an argument
loads a `.env` file found from the working directory and then reads the
`DATABASE_URL` environment variable, for example:

    DATABASE_URL=tasks.db

A `sqlite://` prefix is accepted as well as a plain file path, and a path
beginning with `file:` is opened as an SQLite URI. Opening a connection
prints `Connecting to database at: <url>`. If `DATABASE_URL` is not set, the
URL names no path, or SQLite cannot open it, `ConnectionError_` is raised.
`database_path(url)` returns the path that would be handed to SQLite.

## Listing users

    taskboard-show-users

This connects to the database named by `DATABASE_URL` and prints up to five
users, each as its name, e-mail address and whether it is active, between
separator lines. It exits with status 1, printing the reason on standard
error, if the connection cannot be made or the users cannot be loaded.

## Using the library

```python
from taskboard.connection import establish_connection
from taskboard.schema import create_schema
from taskboard.models import Task, TaskStatus, NewUser
from taskboard.operations import TaskOperations, TaskStatusOperations
from taskboard.users import insert_user, load_users, set_active_by_name

conn = establish_connection("tasks.db")
create_schema(conn)

insert_user(conn, NewUser(name="David", email="david@example.com", active=True))
set_active_by_name(conn, "David", False)
print(load_users(conn, 10))

TaskStatusOperations().create(conn, TaskStatus(id=0, name="Pending"))

tasks = TaskOperations()
tasks.create(conn, Task(id=0, title="Write report", description=None, status_id=1))
for task in tasks.read_all(conn):
    print(task)
```

### Schema

`taskboard.schema.create_schema(conn)` creates the `task_statuses`, `users`,
`tasks` and `user_tasks` tables if they do not exist yet. Every column except
`tasks.description` is `NOT NULL`, and none has a default.

### Models

`taskboard.models` holds frozen dataclasses for stored rows (`User`, `Task`,
`TaskStatus`, `UserTask`, each with a `from_row` class method) and for rows
ready to insert (`NewUser`, `NewTask`, `NewTaskStatus`, `NewUserTask`).

### CRUD operations

`TaskOperations`, `TaskStatusOperations` and `UserTaskOperations` in
`taskboard.operations` share the `CrudOperations` interface:
`create(conn, new_item)`, `read_all(conn)`, `update(conn, item_id, update_data)`
and `delete(conn, item_id)`.

- `create` ignores the item's `id`; the database assigns one.
- `read_all` returns every row ordered by id.
- Updating a task changes only its title. Updating a status changes only its
  name. Updating an assignment changes its user and task ids and keeps its
  status.
- Creating an assignment inserts only the user and task ids. In the tables
  made by `create_schema`, `user_tasks.status_id` has no default, so this
  raises `sqlite3.IntegrityError` there.

Database errors are raised as `sqlite3` exceptions.

### Users

`taskboard.users` has `insert_user(conn, new_user)`, `load_users(conn, limit)`,
`set_active_by_name(conn, name, active)`, `first_user_by_name(conn, name)`
(raising `LookupError` when there is no such user) and
`delete_users_by_name(conn, name)`. The functions that write return the
number of rows affected.

## What it does not do

- The only command lists users. Tasks, statuses and assignments are managed
  from Python only.
- There are no migrations: `create_schema` only creates missing tables.
- Foreign key constraints are declared but not switched on, so SQLite does
  not check that referenced users, tasks or statuses exist.