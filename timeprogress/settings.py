"""Read-only application settings.

Settings are read from:
    ~/.config/TimeProgress/settings.json

The ``TIMEPROGRESS_FAMILY`` environment variable overrides the layout
family, so a launcher can pick small / medium / large without a file.

Usage::

    settings = load_settings()
    settings.family   # "small" | "medium" | "large" | anything (→ large)
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path


logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "TimeProgress"
SETTINGS_PATH = CONFIG_DIR / "settings.json"
FAMILY_ENV_VAR = "TIMEPROGRESS_FAMILY"


@dataclass
class Settings:
    """Host-level preferences.  The progress maths takes none of these."""

    family: str = "large"
    title: str = "Time Progress"
    padding: int = 12                      # px on every side


def _matching_types(values: dict, path: Path) -> dict:
    """Drop values whose type differs from the field default's type."""
    defaults = Settings()
    kept = {}
    for key, value in values.items():
        expected = type(getattr(defaults, key))
        if type(value) is not expected:
            logger.warning(
                "Ignoring %s in %s: expected %s, got %r",
                key, path, expected.__name__, value,
            )
            continue
        kept[key] = value
    return kept


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from disk, falling back to defaults."""
    path = path or SETTINGS_PATH
    settings = Settings()
    if path.exists():
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
        else:
            if isinstance(data, dict):
                # Only use keys that exist in the dataclass
                valid_keys = {f.name for f in fields(Settings)}
                filtered = {k: v for k, v in data.items() if k in valid_keys}
                settings = Settings(**_matching_types(filtered, path))
            else:
                logger.warning("Ignoring settings file %s: not a JSON object", path)

    override = os.environ.get(FAMILY_ENV_VAR)
    if override:
        settings.family = override
    return settings
