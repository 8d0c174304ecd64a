# src/todo_list/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the ActionManager (which loads the task file),
then runs the interactive prompt in the main thread.

Exit codes:
- 0 normal exit
- 2 the task file exists but is damaged (it is left untouched)
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

import colorama

from ..config import Settings, get_settings
from ..errors import CorruptedTaskDataError
from ..logging_setup import parse_level, setup_logging
from .bootstrap import create_action_manager, create_prompt

logger = logging.getLogger(__name__)

EXIT_CORRUPTED_DATA = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="todo-list", description="Interactive to-do list.")
    parser.add_argument("--tasks", metavar="PATH", help="JSON file holding the tasks")
    parser.add_argument("--messages", metavar="PATH", help="JSON file overriding shell texts")
    parser.add_argument("--no-color", action="store_true", help="disable colored output")
    parser.add_argument("--log-level", metavar="LEVEL", help="console log level (e.g. INFO)")
    return parser


def resolve_settings(argv: Sequence[str] | None = None, base: Settings | None = None) -> Settings:
    args = build_parser().parse_args(argv)
    settings = base if base is not None else get_settings()
    return settings.with_overrides(
        tasks_path=args.tasks,
        messages_path=args.messages,
        color=False if args.no_color else None,
        log_level=args.log_level,
    )


def main(argv: Sequence[str] | None = None) -> int:
    settings = resolve_settings(argv)

    log_file = setup_logging(
        log_dir=settings.log_dir,
        console_level=parse_level(settings.log_level),
    )
    logger.info("Starting %s (log=%s)...", settings.app_name, log_file)

    if settings.color:
        colorama.just_fix_windows_console()

    try:
        actions = create_action_manager(settings=settings)
    except CorruptedTaskDataError as e:
        logger.info("Refusing to start: %s", e)
        print(f"{settings.app_name}: cannot load tasks from {e.source}: {e.reason}", file=sys.stderr)
        return EXIT_CORRUPTED_DATA

    prompt = create_prompt(actions, settings=settings)
    prompt.run()

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
