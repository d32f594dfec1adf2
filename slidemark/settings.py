"""User settings for the presenter.

Settings are read once at startup from ``settings.json`` in the
OS-appropriate config directory. The file is optional; missing, unreadable
or invalid entries fall back to the defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import PresenterConstants

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PresenterSettings:
    """Layout and styling preferences.

    Attributes:
        min_columns_for_padding: Terminal width from which pages get a left margin
        left_padding: Width of that margin in columns
        color: Use colored styles; False renders plain text
    """
    min_columns_for_padding: int = PresenterConstants.MIN_COLUMNS_FOR_PADDING
    left_padding: int = PresenterConstants.LEFT_PADDING_SPACES
    color: bool = True


def validate_setting(key: str, value: Any) -> bool:
    """Return True if value is acceptable for the named setting."""
    # bool is a subclass of int; reject it for numeric settings
    if key == 'min_columns_for_padding':
        return isinstance(value, int) and not isinstance(value, bool) and value >= 1
    if key == 'left_padding':
        return isinstance(value, int) and not isinstance(value, bool) and value >= 0
    if key == 'color':
        return isinstance(value, bool)
    return False


class SettingsLoader:
    """Loads PresenterSettings from the user's config directory."""

    def __init__(self, config_dir: Optional[Path] = None):
        self._config_dir = config_dir or Path(platformdirs.user_config_dir("slidemark"))
        self._settings_file = self._config_dir / "settings.json"

    @property
    def settings_file(self) -> Path:
        return self._settings_file

    def _read_raw(self) -> Dict[str, Any]:
        """Read the settings file.

        Returns:
            The decoded mapping, or an empty dict if the file doesn't exist
            or can't be read.
        """
        if not self._settings_file.exists():
            return {}
        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            return {}
        return data

    def load(self) -> PresenterSettings:
        """Return settings with valid file entries applied over the defaults."""
        raw = self._read_raw()
        known = {f.name for f in fields(PresenterSettings)}
        overrides: Dict[str, Any] = {}
        for key, value in raw.items():
            if key not in known:
                logger.warning(f"Unknown setting {key!r} ignored")
            elif not validate_setting(key, value):
                logger.warning(f"Invalid value {value!r} for setting {key!r} ignored")
            else:
                overrides[key] = value
        settings = replace(PresenterSettings(), **overrides)
        logger.debug(f"Loaded settings: {settings}")
        return settings


def load_settings(config_dir: Optional[Path] = None) -> PresenterSettings:
    """Load presenter settings, from config_dir if given."""
    return SettingsLoader(config_dir).load()
