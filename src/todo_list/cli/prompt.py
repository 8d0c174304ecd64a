# src/todo_list/cli/prompt.py

"""
Interactive shell.

Reads a command word, collects the arguments it needs (asking for
confirmation before anything changes), hands an ActionArgs bundle to the
ActionManager and prints the outcome.
"""

from __future__ import annotations

import logging
from enum import Enum, StrEnum

from colorama import Fore, Style

from ..core.actions import ActionArgs, ActionManager, Command
from ..core.ports import Display, Reader
from .messages import LOGO, Messages

logger = logging.getLogger(__name__)


class ShellCommand(StrEnum):
    ADD = "add"
    DISPLAY = "display"
    REMOVE = "remove"
    UPDATE = "update"
    COMPLETE = "complete"
    SAVE = "save"
    EXIT = "exit"


class Tone(Enum):
    ERROR = Fore.RED
    SUCCESS = Fore.GREEN
    FANCY = Fore.CYAN
    DEFAULT = ""


class ConsoleDisplay:
    def show(self, message: str) -> None:
        print(message, end="", flush=True)


class ConsoleReader:
    def read(self) -> str:
        return input()


class Prompt:
    def __init__(
        self,
        actions: ActionManager,
        display: Display,
        reader: Reader,
        messages: Messages | None = None,
        *,
        color: bool = True,
    ) -> None:
        self._actions = actions
        self._display = display
        self._reader = reader
        self._messages = messages or Messages()
        self._color = color
        self._running = False

    # ---- output / input ----

    def _print(self, text: str, tone: Tone = Tone.DEFAULT) -> None:
        if self._color and tone.value:
            text = f"{tone.value}{text}{Style.RESET_ALL}"
        self._display.show(text)

    def _say(self, token: str, tone: Tone = Tone.DEFAULT) -> None:
        self._print(self._messages.get(token), tone)

    def _read(self) -> str:
        return self._reader.read().rstrip("\r\n")

    def _confirm(self, question_token: str) -> bool:
        yes = self._messages.get("input.yes").lower()
        no = self._messages.get("input.no").lower()
        while True:
            self._say(question_token)
            answer = self._read().strip().lower()
            if answer == yes:
                return True
            if answer == no:
                self._say("error.canceled", Tone.ERROR)
                return False
            self._say("error.option", Tone.ERROR)

    def _ask_id(self, question_token: str) -> str | None:
        cancel = self._messages.get("input.exit").lower()
        while True:
            self._say(question_token)
            answer = self._read().strip()
            if answer.lower() == cancel:
                self._say("error.canceled", Tone.ERROR)
                return None
            if answer.isdecimal():
                return answer
            self._say("error.task.id", Tone.ERROR)

    def _ask_fields(self) -> tuple[str, str]:
        self._say("task.name")
        name = self._read()
        self._say("task.description")
        description = self._read()
        return name, description

    def _dispatch(self, args: ActionArgs) -> bool:
        return self._actions.process(args, self._display)

    def _report(self, ok: bool, success_token: str, error_token: str) -> None:
        if ok:
            self._say(success_token, Tone.SUCCESS)
        else:
            self._say(error_token, Tone.ERROR)

    # ---- commands ----

    def _cmd_add(self) -> None:
        name, description = self._ask_fields()
        if not self._confirm("question.task.add"):
            return
        ok = self._dispatch(ActionArgs(Command.ADD, first=name, second=description))
        self._report(ok, "success.task.add", "error.task.add")

    def _cmd_display(self) -> None:
        if len(self._actions.manager) == 0:
            self._say("info.empty")
            return
        self._dispatch(ActionArgs(Command.DISPLAY))
        self._print("\n")

    def _cmd_remove(self) -> None:
        task_id = self._ask_id("id.remove")
        if task_id is None or not self._confirm("question.task.remove"):
            return
        ok = self._dispatch(ActionArgs(Command.REMOVE, first=task_id))
        self._report(ok, "success.task.remove", "error.task.remove")

    def _cmd_update(self) -> None:
        task_id = self._ask_id("id.update")
        if task_id is None:
            return
        name, description = self._ask_fields()
        if not self._confirm("question.task.update"):
            return
        ok = self._dispatch(
            ActionArgs(Command.UPDATE, first=name, second=description, third=task_id)
        )
        self._report(ok, "success.task.update", "error.task.update")

    def _cmd_complete(self) -> None:
        task_id = self._ask_id("id.complete")
        if task_id is None or not self._confirm("question.task.complete"):
            return
        ok = self._dispatch(ActionArgs(Command.COMPLETE, first=task_id))
        self._report(ok, "success.task.complete", "error.task.complete")

    def _cmd_save(self) -> None:
        if not self._actions.modified:
            self._say("info.save.nothing")
            return
        if not self._confirm("question.overwrite"):
            return
        ok = self._dispatch(ActionArgs(Command.SAVE))
        self._report(ok, "success.save", "error.save")

    def _cmd_exit(self) -> None:
        if not self._actions.modified or self._confirm("question.modification"):
            self._running = False

    def handle(self, line: str) -> bool:
        """Run one shell command. Returns False for an unknown command word."""
        try:
            command = ShellCommand(line.strip().lower())
        except ValueError:
            self._say("error.command", Tone.ERROR)
            return False

        if command is ShellCommand.ADD:
            self._cmd_add()
        elif command is ShellCommand.DISPLAY:
            self._cmd_display()
        elif command is ShellCommand.REMOVE:
            self._cmd_remove()
        elif command is ShellCommand.UPDATE:
            self._cmd_update()
        elif command is ShellCommand.COMPLETE:
            self._cmd_complete()
        elif command is ShellCommand.SAVE:
            self._cmd_save()
        elif command is ShellCommand.EXIT:
            self._cmd_exit()
        return True

    def run(self) -> None:
        logger.info("Prompt started (tasks=%d).", len(self._actions.manager))
        self._running = True
        self._print(LOGO, Tone.FANCY)

        while self._running:
            self._print(self._messages.menu())
            self._say("prompt", Tone.FANCY)
            try:
                line = self._read()
                if not line.strip():
                    continue
                self.handle(line)
            except EOFError:
                logger.info("End of input, leaving prompt.")
                self._print("\n")
                break
            except KeyboardInterrupt:
                logger.info("Interrupted, leaving prompt.")
                self._print("\n")
                break

        self._running = False
        if self._actions.modified:
            logger.info("Leaving with unsaved modifications.")
        logger.info("Prompt finished.")
