# src/todo_list/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The dispatcher depends on Protocols instead of concrete implementations.
This keeps storage and terminal I/O swappable and makes testing easier.
"""

from collections.abc import Sequence
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepository(Protocol):
    """
    Durable storage for the whole task list.

    - load() returns [] when nothing was saved yet (that is not an error).
    - save() overwrites everything and reports failure as False.
    - save() then load() gives back the same tasks in the same order.
    """

    def load(self) -> list[Task]: ...
    def save(self, tasks: Sequence[Task]) -> bool: ...


class Display(Protocol):
    """Writes text verbatim (no newline added)."""

    def show(self, message: str) -> None: ...


class Reader(Protocol):
    """Returns one input line without its newline; raises EOFError at end of input."""

    def read(self) -> str: ...
