# src/todo_list/errors.py

"""
Exception hierarchy.

Most of these never reach the shell: the task store turns validation and
lookup failures into boolean results. Only CorruptedTaskDataError is meant
to stop the program (see cli/main.py).
"""

from __future__ import annotations


class TodoError(Exception):
    """Base class for all todo_list errors."""


class ValidationError(TodoError, ValueError):
    """Task name or description is empty after trimming."""


class NotFoundError(TodoError, LookupError):
    """No task at the requested position or with the requested id."""


class PersistenceError(TodoError):
    """Durable storage could not be read or written."""


class CorruptedTaskDataError(PersistenceError):
    """Persisted tasks exist but cannot be decoded."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason


class MissingArgumentError(TodoError, ValueError):
    """A command was dispatched without one of its required arguments."""
