"""Persistent JSON config helpers.

Stores the prompt marker and the selector theme name.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "autopick"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_PROMPT = "> "


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored so a read-only config
    directory never breaks a selection.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def is_valid_prompt(value: object) -> bool:
    if not isinstance(value, str) or not value:
        return False
    return all(ch.isprintable() for ch in value)


def load_prompt() -> str:
    """Return the persisted prompt marker, or ``DEFAULT_PROMPT``.

    Control characters would move the cursor mid-render, so any prompt
    containing one is rejected.
    """
    value = load_config().get("prompt")
    return value if is_valid_prompt(value) else DEFAULT_PROMPT


def save_prompt(prompt: str) -> None:
    if not is_valid_prompt(prompt):
        return
    config = load_config()
    config["prompt"] = prompt
    save_config(config)


def load_theme_name() -> str | None:
    value = load_config().get("theme")
    return value if isinstance(value, str) and value.strip() else None


def save_theme_name(name: str) -> None:
    config = load_config()
    config["theme"] = str(name)
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_PROMPT",
    "is_valid_prompt",
    "load_config",
    "load_prompt",
    "load_theme_name",
    "save_config",
    "save_prompt",
    "save_theme_name",
]
