# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from todo_list.config import Settings
from todo_list.core.actions import ActionManager
from todo_list.tasks.task_manager import TaskManager
from todo_list.tasks.task_models import IdGenerator

from .fakes import FakeDisplay, FakeTaskRepository


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """Settings rooted in a per-test tmp dir, independent of the environment."""
    data_dir = tmp_path / "data"
    return Settings(
        app_name="todo-test",
        log_level="WARNING",
        color=False,
        messages_path=None,
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.json",
        log_dir=data_dir / "logs",
    )


@pytest.fixture()
def ids() -> IdGenerator:
    return IdGenerator()


@pytest.fixture()
def manager(ids: IdGenerator) -> TaskManager:
    return TaskManager(ids)


@pytest.fixture()
def repo() -> FakeTaskRepository:
    return FakeTaskRepository()


@pytest.fixture()
def actions(repo: FakeTaskRepository, manager: TaskManager) -> ActionManager:
    return ActionManager(repo, manager)


@pytest.fixture()
def display() -> FakeDisplay:
    return FakeDisplay()


@pytest.fixture()
def restore_root_logging():
    """Drop and close the handlers setup_logging() installs on the root logger."""
    root = logging.getLogger()
    before = set(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in before:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    logging.captureWarnings(False)
