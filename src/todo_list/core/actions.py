# src/todo_list/core/actions.py

"""
Action dispatcher.

Turns a command plus up to three positional string arguments into a call on
the TaskManager (or the repository for "save"). The shell collects the
arguments; the dispatcher only reports success as a bool.

Argument layout per command:
- add       first=name, second=description
- display   (none)
- remove    first=id
- update    first=name, second=description, third=id
- complete  first=id
- save      (none)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import assert_never

from ..errors import MissingArgumentError
from ..tasks.task_manager import TaskManager
from .ports import Display, TaskRepository

logger = logging.getLogger(__name__)


class Command(StrEnum):
    ADD = "add"
    DISPLAY = "display"
    REMOVE = "remove"
    UPDATE = "update"
    COMPLETE = "complete"
    SAVE = "save"

    @classmethod
    def parse(cls, raw: str | None) -> Command | None:
        if not raw:
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


@dataclass(slots=True)
class ActionArgs:
    command: str
    first: str | None = None
    second: str | None = None
    third: str | None = None


def _require(args: ActionArgs, field: str) -> str:
    value = getattr(args, field)
    if value is None:
        raise MissingArgumentError(f"'{args.command}' requires argument '{field}'")
    return value


def _parse_id(raw: str) -> int | None:
    # Same rule as the shell: plain digits only, so "+5" and "1_0" are rejected.
    raw = raw.strip()
    if not raw.isdecimal():
        return None
    return int(raw)


class ActionManager:
    """
    Owns the TaskManager for a session and wires it to a repository.

    Persisted tasks are loaded in the constructor; a CorruptedTaskDataError
    from the repository propagates to the caller.
    """

    def __init__(self, repository: TaskRepository, task_manager: TaskManager | None = None) -> None:
        self._repository = repository
        self._manager = task_manager if task_manager is not None else TaskManager()
        self._modified = False
        self._load()

    @property
    def manager(self) -> TaskManager:
        return self._manager

    @property
    def modified(self) -> bool:
        """True when the list changed since it was loaded or last saved."""
        return self._modified

    def _load(self) -> None:
        tasks = self._repository.load()
        self._manager.replace_all(tasks)

    def process(self, args: ActionArgs, display: Display) -> bool:
        command = Command.parse(args.command)
        if command is None:
            logger.info("Unknown command: %r", args.command)
            return False

        ok = self._dispatch(command, args, display)
        logger.debug("Command %s -> %s", command.value, ok)

        if ok and command in (Command.ADD, Command.REMOVE, Command.UPDATE, Command.COMPLETE):
            self._modified = True
        elif ok and command is Command.SAVE:
            self._modified = False
        return ok

    def _dispatch(self, command: Command, args: ActionArgs, display: Display) -> bool:
        if command is Command.ADD:
            return self._add(args)
        if command is Command.DISPLAY:
            return self._display(display)
        if command is Command.REMOVE:
            return self._remove(args)
        if command is Command.UPDATE:
            return self._update(args)
        if command is Command.COMPLETE:
            return self._complete(args)
        if command is Command.SAVE:
            return self._save()
        assert_never(command)

    # ---- handlers ----

    def _add(self, args: ActionArgs) -> bool:
        name = _require(args, "first")
        description = _require(args, "second")
        return self._manager.add(name, description)

    def _display(self, display: Display) -> bool:
        for task in self._manager.all():
            display.show(task.render() + "\n")
        return True

    def _remove(self, args: ActionArgs) -> bool:
        task_id = _parse_id(_require(args, "first"))
        if task_id is None:
            return False
        return self._manager.remove_by(task_id)

    def _update(self, args: ActionArgs) -> bool:
        name = _require(args, "first")
        description = _require(args, "second")
        task_id = _parse_id(_require(args, "third"))
        if task_id is None:
            return False
        return self._manager.update_by(task_id, name, description)

    def _complete(self, args: ActionArgs) -> bool:
        task_id = _parse_id(_require(args, "first"))
        if task_id is None:
            return False
        return self._manager.complete_by(task_id)

    def _save(self) -> bool:
        return self._repository.save(self._manager.snapshot_for_persistence())
