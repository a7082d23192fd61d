[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskboard"
version = "0.1.0"
description = "SQLite-backed users, tasks, task statuses and user-task assignments with simple CRUD operations"
requires-python = ">=3.10"
dependencies = [
    "python-dotenv",
]
keywords = ["sqlite", "crud", "tasks", "users", "database"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
taskboard-show-users = "taskboard.show_users:main"

[tool.hatch.build.targets.wheel]
packages = ["taskboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
