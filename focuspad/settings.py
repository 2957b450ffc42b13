"""Persisted user preferences.

Only the in-app upgrade flag survives a restart; timer state never does.
Stored at:
    ~/Library/Application Support/FocusPad/settings.json

Usage::

    settings = load_settings()
    settings.is_paid_user = True
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path

log = logging.getLogger(__name__)

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "FocusPad"
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"


@dataclass
class Settings:
    is_paid_user: bool = False


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults."""
    if not SETTINGS_PATH.exists():
        return Settings()
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        log.warning("Unreadable settings at %s; using defaults", SETTINGS_PATH)
        return Settings()
    if not isinstance(data, dict):
        log.warning("Unexpected settings format at %s; using defaults", SETTINGS_PATH)
        return Settings()
    # Only use keys that exist in the dataclass
    valid_keys = {f.name for f in fields(Settings)}
    filtered = {k: v for k, v in data.items() if k in valid_keys}
    settings = Settings(**filtered)
    settings.is_paid_user = settings.is_paid_user is True
    return settings


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
