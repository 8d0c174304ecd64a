# src/todo_list/cli/messages.py

"""
User-facing texts of the interactive shell.

Every text has a dotted token. A JSON object file can replace any of the
defaults (e.g. to translate the shell):

    {"menu.add": "Ajouter  Ajouter une tache\\n", "input.yes": "oui"}

Tokens that do not exist in DEFAULT_MESSAGES are ignored.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

LOGO = r"""
  _____        _       _    _    _
 |_   _|__  __| |___  | |  (_)__| |_
   | |/ _ \/ _` / _ \ | |__| (_-<  _|
   |_|\___/\__,_\___/ |____|_/__/\__|

"""

DEFAULT_MESSAGES: dict[str, str] = {
    "error.command": "Invalid command.\n\n",
    "error.option": "Invalid option.\n",
    "error.canceled": "Canceled.\n\n",
    "error.task.add": "Couldn't add the task. Name and description must not be empty.\n\n",
    "error.task.remove": "Couldn't remove the task.\n\n",
    "error.task.update": "Couldn't update the task.\n\n",
    "error.task.complete": "Couldn't complete the task.\n\n",
    "error.task.id": "Please type a valid id number.\n",
    "error.save": "Couldn't save the tasks. See the log for details.\n\n",
    "question.overwrite": "Would you like to overwrite the saved tasks? (yes/no): ",
    "question.modification": "You have unsaved modifications. Quit anyway? (yes/no): ",
    "question.task.add": "You are about to add a new task. Are you sure? (yes/no): ",
    "question.task.remove": "Would you like to remove it? (yes/no): ",
    "question.task.update": "Would you like to update it? (yes/no): ",
    "question.task.complete": "Would you like to complete it? (yes/no): ",
    "success.task.add": "New task added.\n\n",
    "success.task.remove": "Task removed.\n\n",
    "success.task.update": "Task updated.\n\n",
    "success.task.complete": "Task completed.\n\n",
    "success.save": "Tasks saved.\n\n",
    "info.save.nothing": "Nothing to save.\n\n",
    "info.empty": "No tasks yet.\n\n",
    "id.remove": "Type the task id to delete or exit to cancel: ",
    "id.update": "Type the task id to update or exit to cancel: ",
    "id.complete": "Type the task id to complete or exit to cancel: ",
    "task.name": "Type the task name: ",
    "task.description": "Type the task description: ",
    "input.yes": "yes",
    "input.no": "no",
    "input.exit": "exit",
    "menu.add": "Add      To add a new task\n",
    "menu.remove": "Remove   To remove a task\n",
    "menu.update": "Update   To update a task\n",
    "menu.display": "Display  To display tasks\n",
    "menu.complete": "Complete To complete a task\n",
    "menu.save": "Save     To save the tasks\n",
    "menu.exit": "Exit     To quit application\n\n",
    "prompt": "(todo) > ",
}

MENU_TOKENS = (
    "menu.add",
    "menu.remove",
    "menu.update",
    "menu.display",
    "menu.complete",
    "menu.save",
    "menu.exit",
)


class Messages:
    def __init__(self, overrides: Mapping[str, str] | None = None) -> None:
        self._texts = dict(DEFAULT_MESSAGES)
        if overrides:
            self._apply(overrides)

    def _apply(self, overrides: Mapping[str, str]) -> None:
        for key, value in overrides.items():
            if key not in self._texts:
                logger.debug("Ignoring unknown message token %r", key)
                continue
            if not isinstance(value, str):
                logger.warning("Message %r must be a string, keeping default.", key)
                continue
            self._texts[key] = value

    @classmethod
    def load(cls, path: str | Path | None) -> Messages:
        """Defaults overlaid with the JSON object in `path` (best-effort)."""
        if path is None:
            return cls()
        path = Path(path)
        if not path.exists():
            logger.warning("Messages file %s not found, using defaults.", path)
            return cls()
        try:
            data = json.loads(path.read_text("utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError):
            logger.exception("Failed to read messages from %s, using defaults.", path)
            return cls()
        if not isinstance(data, dict):
            logger.warning("Messages file %s is not a JSON object, using defaults.", path)
            return cls()
        logger.info("Loaded %d message overrides from %s", len(data), path)
        return cls(data)

    def get(self, token: str) -> str:
        return self._texts[token]

    def menu(self) -> str:
        return "".join(self._texts[t] for t in MENU_TOKENS)
