# tests/test_prompt.py

from __future__ import annotations

from todo_list.cli.messages import Messages
from todo_list.cli.prompt import Prompt
from todo_list.core.actions import ActionManager
from todo_list.tasks.task_manager import TaskManager
from todo_list.tasks.task_models import Task

from .fakes import FakeDisplay, FakeTaskRepository, ScriptedReader


def _prompt(actions: ActionManager, lines: list[str], **kwargs) -> tuple[Prompt, FakeDisplay]:
    display = FakeDisplay()
    prompt = Prompt(actions, display, ScriptedReader(lines), color=False, **kwargs)
    return prompt, display


def test_add_confirmed_then_exit_after_saving(actions: ActionManager, repo: FakeTaskRepository) -> None:
    prompt, display = _prompt(
        actions,
        ["add", "Buy milk", "2%", "yes", "save", "yes", "exit"],
    )
    prompt.run()

    assert "New task added." in display.text
    assert "Tasks saved." in display.text
    assert repo.tasks == [Task(id=1, name="Buy milk", description="2%")]
    assert actions.modified is False


def test_add_declined_changes_nothing(actions: ActionManager) -> None:
    prompt, display = _prompt(actions, ["add", "a", "b", "maybe", "no", "exit"])
    prompt.run()

    assert "Invalid option." in display.text
    assert "Canceled." in display.text
    assert len(actions.manager) == 0


def test_add_with_empty_name_reports_error(actions: ActionManager) -> None:
    prompt, display = _prompt(actions, ["add", "", "b", "yes", "exit"])
    prompt.run()

    assert "Couldn't add the task." in display.text
    assert len(actions.manager) == 0


def test_complete_reasks_until_numeric_id(actions: ActionManager) -> None:
    actions.manager.add("a", "b")
    prompt, display = _prompt(actions, ["complete", "one", "1", "yes"])
    prompt.run()

    assert "Please type a valid id number." in display.text
    assert "Task completed." in display.text
    assert actions.manager.get_by_position(0).done is True


def test_remove_unknown_id_reports_failure(actions: ActionManager) -> None:
    actions.manager.add("a", "b")
    prompt, display = _prompt(actions, ["remove", "5", "yes"])
    prompt.run()

    assert "Couldn't remove the task." in display.text
    assert len(actions.manager) == 1


def test_update_can_be_cancelled_at_id(actions: ActionManager) -> None:
    actions.manager.add("a", "b")
    prompt, display = _prompt(actions, ["update", "exit", "display"])
    prompt.run()

    assert "Canceled." in display.text
    assert "1. [ ] - a - b\n" in display.messages


def test_update_asks_id_then_fields(actions: ActionManager) -> None:
    actions.manager.add("a", "b")
    prompt, display = _prompt(actions, ["UPDATE", "1", "new name", "new text", "yes"])
    prompt.run()

    assert "Task updated." in display.text
    task = actions.manager.get_by_position(0)
    assert (task.name, task.description) == ("new name", "new text")


def test_display_empty_list(actions: ActionManager) -> None:
    prompt, display = _prompt(actions, ["display"])
    prompt.run()
    assert "No tasks yet." in display.text


def test_unknown_command(actions: ActionManager) -> None:
    prompt, display = _prompt(actions, ["fly"])
    assert prompt.handle("fly") is False
    assert "Invalid command." in display.text


def test_save_without_modifications_does_not_write(
    actions: ActionManager, repo: FakeTaskRepository
) -> None:
    prompt, display = _prompt(actions, ["save"])
    prompt.run()

    assert "Nothing to save." in display.text
    assert repo.saved == []


def test_failed_save_is_reported(manager: TaskManager) -> None:
    repo = FakeTaskRepository(save_result=False)
    actions = ActionManager(repo, manager)
    actions.manager.add("a", "b")
    prompt, display = _prompt(actions, ["complete", "1", "yes", "save", "yes"])
    prompt.run()

    assert "Couldn't save the tasks." in display.text
    assert actions.modified is True


def test_exit_with_modifications_asks_first(actions: ActionManager) -> None:
    reader = ScriptedReader(["add", "a", "b", "yes", "exit", "no", "exit", "yes", "display"])
    prompt = Prompt(actions, FakeDisplay(), reader, color=False)
    prompt.run()

    # "display" after the confirmed exit is never read.
    assert reader.reads == 8


def test_exit_without_modifications_quits_immediately(actions: ActionManager) -> None:
    reader = ScriptedReader(["exit", "display"])
    Prompt(actions, FakeDisplay(), reader, color=False).run()
    assert reader.reads == 1


def test_colored_output_wraps_messages(actions: ActionManager) -> None:
    display = FakeDisplay()
    prompt = Prompt(actions, display, ScriptedReader(["fly"]), color=True)
    prompt.run()

    error = next(m for m in display.messages if "Invalid command." in m)
    assert error.startswith("\x1b[31m")
    assert error.endswith("\x1b[0m")


def test_translated_tokens_are_used(actions: ActionManager) -> None:
    messages = Messages({"input.yes": "oui", "input.no": "non", "success.task.add": "Ajoutée\n"})
    prompt, display = _prompt(actions, ["add", "a", "b", "yes", "oui"], messages=messages)
    prompt.run()

    assert "Ajoutée\n" in display.messages
    assert len(actions.manager) == 1
