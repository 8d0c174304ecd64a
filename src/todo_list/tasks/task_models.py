# src/todo_list/tasks/task_models.py

from __future__ import annotations

import threading
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..errors import ValidationError

RECORD_FIELDS = ("id", "name", "description", "done")


class IdGenerator:
    """
    Monotonic task id source.

    The counter starts at 0 and is incremented before each allocation,
    so the first id handed out is 1. Stores that must never reuse each
    other's ids share one instance.
    """

    def __init__(self, start: int = 0) -> None:
        if start < 0:
            raise ValueError("start must be >= 0")
        self._value = start
        self._lock = threading.Lock()

    @property
    def current(self) -> int:
        with self._lock:
            return self._value

    def next_id(self) -> int:
        with self._lock:
            self._value += 1
            return self._value

    def advance_to(self, value: int) -> None:
        """Move the counter forward to `value` (never backwards)."""
        with self._lock:
            if value > self._value:
                self._value = value


def _check_text(field: str, value: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} must not be empty")
    return value.strip()


@dataclass(slots=True)
class Task:
    id: int
    name: str
    description: str
    done: bool = False

    @classmethod
    def create(cls, name: str, description: str, ids: IdGenerator) -> Task:
        """Validate the fields, then allocate the next id from `ids`."""
        clean_name = _check_text("name", name)
        clean_description = _check_text("description", description)
        return cls(id=ids.next_id(), name=clean_name, description=clean_description)

    def update(self, name: str, description: str) -> None:
        # Both fields are checked before anything is assigned.
        clean_name = _check_text("name", name)
        clean_description = _check_text("description", description)
        self.name = clean_name
        self.description = clean_description
        self.done = False

    def mark_done(self, flag: bool = True) -> None:
        self.done = flag

    def render(self) -> str:
        marker = "X" if self.done else " "
        return f"{self.id}. [{marker}] - {self.name} - {self.description}"

    def __str__(self) -> str:
        return self.render()

    # ---- persisted form ----

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "done": self.done,
        }

    @classmethod
    def from_record(cls, raw: Mapping[str, Any]) -> Task:
        """
        Build a Task from a persisted record.

        Raises ValueError describing the first problem found. Records are
        never repaired: a bad record means the stored data is damaged.
        """
        if not isinstance(raw, Mapping):
            raise ValueError(f"record must be an object, got {type(raw).__name__}")

        missing = [f for f in RECORD_FIELDS if f not in raw]
        if missing:
            raise ValueError(f"record is missing {', '.join(missing)}")

        task_id = raw["id"]
        # bool is an int subclass; true/false are not ids.
        if isinstance(task_id, bool) or not isinstance(task_id, int) or task_id < 0:
            raise ValueError(f"invalid id {task_id!r}")

        done = raw["done"]
        if not isinstance(done, bool):
            raise ValueError(f"invalid done flag {done!r} for id {task_id}")

        try:
            name = _check_text("name", raw["name"])
            description = _check_text("description", raw["description"])
        except ValidationError as e:
            raise ValueError(f"{e} (id {task_id})") from e

        return cls(id=task_id, name=name, description=description, done=done)
