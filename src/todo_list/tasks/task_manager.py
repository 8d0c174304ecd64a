# src/todo_list/tasks/task_manager.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace

from ..errors import NotFoundError, ValidationError
from .task_models import IdGenerator, Task

logger = logging.getLogger(__name__)


class TaskManager:
    """
    In-memory task list.

    Tasks keep insertion order. Lookups by id are linear scans; the list is
    a single user's to-do list, so it stays small.

    Mutators return bool instead of raising: False means nothing changed.
    """

    def __init__(self, ids: IdGenerator | None = None) -> None:
        self._tasks: list[Task] = []
        self._ids = ids if ids is not None else IdGenerator()

    @property
    def ids(self) -> IdGenerator:
        return self._ids

    def __len__(self) -> int:
        return len(self._tasks)

    # ---- low-level helpers ----

    def _find(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    # ---- public API ----

    def add(self, name: str, description: str) -> bool:
        try:
            task = Task.create(name, description, self._ids)
        except ValidationError as e:
            logger.debug("Task rejected: %s", e)
            return False
        self._tasks.append(task)
        logger.debug("Task added id=%s", task.id)
        return True

    def get_by_position(self, index: int) -> Task:
        """Return a copy of the task at zero-based `index` (not an id)."""
        if index < 0 or index >= len(self._tasks):
            raise NotFoundError(f"no task at position {index}")
        return replace(self._tasks[index])

    def complete_by(self, task_id: int) -> bool:
        task = self._find(task_id)
        if task is None:
            return False
        task.mark_done(True)
        logger.debug("Task completed id=%s", task_id)
        return True

    def update_by(self, task_id: int, name: str, description: str) -> bool:
        task = self._find(task_id)
        if task is None:
            return False
        try:
            task.update(name, description)
        except ValidationError as e:
            logger.debug("Task update rejected id=%s: %s", task_id, e)
            return False
        logger.debug("Task updated id=%s", task_id)
        return True

    def remove_by(self, task_id: int) -> bool:
        before = len(self._tasks)
        for pos, task in enumerate(self._tasks):
            if task.id == task_id:
                del self._tasks[pos]
                break
        removed = len(self._tasks) < before
        if removed:
            logger.debug("Task removed id=%s", task_id)
        return removed

    def all(self) -> tuple[Task, ...]:
        """Copies of all tasks in list order; editing them does not touch the store."""
        return tuple(replace(t) for t in self._tasks)

    def snapshot_for_persistence(self) -> list[Task]:
        """Copies of all tasks, detached from the live list."""
        return [replace(t) for t in self._tasks]

    def replace_all(self, tasks: Iterable[Task]) -> None:
        """
        Swap in a loaded task list.

        The id generator is moved past the largest loaded id, so new tasks
        never collide with restored ones.
        """
        self._tasks = [replace(t) for t in tasks]
        if self._tasks:
            self._ids.advance_to(max(t.id for t in self._tasks))
        logger.info("Task list loaded: %d tasks, next id=%d", len(self._tasks), self._ids.current + 1)
