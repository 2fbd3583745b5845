"""Settings storage for pyhdiutil configuration."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


SETTINGS_PATH = Path(
    os.environ.get(
        "PYHDIUTIL_SETTINGS_PATH",
        Path.home() / ".config" / "pyhdiutil" / "settings.json",
    )
)

# Default values - use these constants instead of hardcoding values elsewhere
DEFAULT_HDIUTIL_PATH = "/usr/bin/hdiutil"

DEFAULT_SETTINGS: dict[str, Any] = {
    "hdiutil_path": DEFAULT_HDIUTIL_PATH,
    "strict_options": True,
}


@dataclass
class SettingsStore:
    values: dict[str, Any] = field(default_factory=dict)


settings_store = SettingsStore()


def load_settings() -> None:
    settings_store.values = dict(DEFAULT_SETTINGS)
    if SETTINGS_PATH.exists():
        try:
            data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            data = None
        if isinstance(data, dict):
            settings_store.values.update(data)
    env_path = os.environ.get("PYHDIUTIL_HDIUTIL_PATH")
    if env_path:
        settings_store.values["hdiutil_path"] = env_path


def save_settings() -> None:
    SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(settings_store.values, indent=2, sort_keys=True),
        encoding="utf-8",
    )


def get_setting(key: str, default: Any | None = None) -> Any:
    return settings_store.values.get(key, default)


def set_setting(key: str, value: Any) -> None:
    settings_store.values[key] = value
    save_settings()


def get_bool(key: str, default: bool = False) -> bool:
    return bool(get_setting(key, default))


def get_hdiutil_path() -> str:
    return str(get_setting("hdiutil_path", DEFAULT_HDIUTIL_PATH))


load_settings()
