# src/todo_list/tasks/task_repository.py

from __future__ import annotations

import json
import logging
import os
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path

from ..errors import CorruptedTaskDataError
from .task_models import Task

logger = logging.getLogger(__name__)


class JsonFileTaskRepository:
    """
    JSON file task storage.

    File layout: a JSON array of {"id", "name", "description", "done"}
    objects in list order.

    - a missing or blank file loads as an empty list
    - anything else that does not decode cleanly raises CorruptedTaskDataError;
      the file is left untouched so the user can repair it
    - saving writes a sibling .tmp file and renames it over the target
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        if not self._path.exists():
            logger.info("No task file at %s, starting empty.", self._path)
            return []

        try:
            raw = self._path.read_text("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CorruptedTaskDataError(str(self._path), f"unreadable: {e}") from e

        if not raw.strip():
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CorruptedTaskDataError(str(self._path), f"invalid JSON: {e}") from e

        if not isinstance(data, list):
            raise CorruptedTaskDataError(
                str(self._path), f"expected a list of tasks, got {type(data).__name__}"
            )

        tasks: list[Task] = []
        seen: set[int] = set()
        for pos, record in enumerate(data):
            try:
                task = Task.from_record(record)
            except ValueError as e:
                raise CorruptedTaskDataError(str(self._path), f"record #{pos}: {e}") from e
            if task.id in seen:
                raise CorruptedTaskDataError(str(self._path), f"duplicate id {task.id}")
            seen.add(task.id)
            tasks.append(task)

        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Sequence[Task]) -> bool:
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            payload = json.dumps([t.to_record() for t in tasks], ensure_ascii=False, indent=2)
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload + "\n", "utf-8")
            os.replace(tmp, self._path)
        except (OSError, TypeError, ValueError):
            logger.exception("Failed to save tasks to %s", self._path)
            try:
                tmp.unlink(missing_ok=True)
            except OSError:
                logger.debug("Could not remove %s", tmp, exc_info=True)
            return False

        logger.info("Saved %d tasks to %s", len(tasks), self._path)
        return True


class InMemoryTaskRepository:
    """Non-durable storage: keeps copies of the last saved list."""

    def __init__(self, tasks: Sequence[Task] | None = None) -> None:
        self._tasks: list[Task] = [replace(t) for t in tasks or ()]
        self.save_count = 0

    def load(self) -> list[Task]:
        return [replace(t) for t in self._tasks]

    def save(self, tasks: Sequence[Task]) -> bool:
        self._tasks = [replace(t) for t in tasks]
        self.save_count += 1
        return True
