# tests/test_messages.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from todo_list.cli.messages import DEFAULT_MESSAGES, Messages


def test_defaults_and_menu() -> None:
    messages = Messages()
    assert messages.get("input.yes") == "yes"
    menu = messages.menu()
    assert menu.startswith(DEFAULT_MESSAGES["menu.add"])
    assert menu.endswith(DEFAULT_MESSAGES["menu.exit"])


def test_unknown_token_raises() -> None:
    with pytest.raises(KeyError):
        Messages().get("menu.fly")


def test_load_overrides_known_keys_only(tmp_path: Path) -> None:
    path = tmp_path / "fr.json"
    path.write_text(
        json.dumps({"input.yes": "oui", "menu.fly": "Voler\n", "input.no": 3}, ensure_ascii=False),
        "utf-8",
    )
    messages = Messages.load(path)

    assert messages.get("input.yes") == "oui"
    assert messages.get("input.no") == "no"
    with pytest.raises(KeyError):
        messages.get("menu.fly")


@pytest.mark.parametrize("content", ["{broken", "[1, 2]"])
def test_bad_file_falls_back_to_defaults(tmp_path: Path, content: str) -> None:
    path = tmp_path / "messages.json"
    path.write_text(content, "utf-8")
    assert Messages.load(path).get("prompt") == DEFAULT_MESSAGES["prompt"]


def test_missing_file_or_none_uses_defaults(tmp_path: Path) -> None:
    assert Messages.load(None).get("prompt") == DEFAULT_MESSAGES["prompt"]
    assert Messages.load(tmp_path / "nope.json").get("prompt") == DEFAULT_MESSAGES["prompt"]
