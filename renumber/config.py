import json
import os
from dataclasses import dataclass, field
from typing import List, Optional

from renumber.media.rename import MEDIA_EXTENSIONS

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
SETTINGS_PATH = os.path.join(PROJECT_ROOT, "config", "settings.json")

DEFAULT_SOURCE_FILE = "content-formatter.txt"


@dataclass
class Settings:
    source_file: str = DEFAULT_SOURCE_FILE
    encoding: str = "utf-8"
    media_extensions: List[str] = field(default_factory=lambda: list(MEDIA_EXTENSIONS))


def _pick_str(data: dict, key: str, default: str) -> str:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, str) or not value:
        print(f"Warning: '{key}' in settings must be a non-empty string; using default: {default}")
        return default
    return value


def load_settings(path: Optional[str] = None) -> Settings:
    """Load settings from config/settings.json, falling back to defaults."""
    settings_path = path or SETTINGS_PATH
    settings = Settings()

    if not os.path.exists(settings_path):
        print(f"Warning: settings.json not found at {settings_path}")
        return settings

    try:
        with open(settings_path, "r", encoding="utf-8") as settings_file:
            data = json.load(settings_file) or {}
    except (OSError, ValueError) as exc:
        print(f"Warning: Could not load settings from {settings_path}: {exc}")
        return settings

    if not isinstance(data, dict):
        print(f"Warning: settings file must contain a JSON object: {settings_path}")
        return settings

    settings.source_file = _pick_str(data, "source_file", settings.source_file)
    settings.encoding = _pick_str(data, "encoding", settings.encoding)

    exts = data.get("media_extensions")
    if exts is not None:
        if isinstance(exts, list) and exts and all(isinstance(e, str) and e.startswith(".") for e in exts):
            settings.media_extensions = [e.lower() for e in exts]
        else:
            print("Warning: 'media_extensions' must be a list of '.ext' strings; using defaults.")

    return settings
