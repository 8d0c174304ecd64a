# src/todo_list/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- ensures local (gitignored) directories exist,
- wires the JSON file repository into the ActionManager,
- builds the Prompt with console I/O and the message table.
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..core.actions import ActionManager
from ..core.ports import Display, Reader
from ..tasks.task_manager import TaskManager
from ..tasks.task_models import IdGenerator
from ..tasks.task_repository import JsonFileTaskRepository
from .messages import Messages
from .prompt import ConsoleDisplay, ConsoleReader, Prompt

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings: Settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)
    settings.log_dir.mkdir(parents=True, exist_ok=True)


def create_action_manager(*, settings: Settings | None = None, ids: IdGenerator | None = None) -> ActionManager:
    """
    Build the ActionManager for `settings` (falls back to get_settings()).

    Loads the task file immediately; CorruptedTaskDataError propagates.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    repository = JsonFileTaskRepository(settings.tasks_path)
    actions = ActionManager(repository, TaskManager(ids))
    logger.info("Using task file %s", settings.tasks_path)
    return actions


def create_prompt(
    actions: ActionManager,
    *,
    settings: Settings | None = None,
    display: Display | None = None,
    reader: Reader | None = None,
) -> Prompt:
    if settings is None:
        settings = get_settings()

    return Prompt(
        actions,
        display if display is not None else ConsoleDisplay(),
        reader if reader is not None else ConsoleReader(),
        Messages.load(settings.messages_path),
        color=settings.color,
    )
