"""User settings for the viewer.

Settings live in a JSON object stored in the OS-appropriate config
directory. Missing, unreadable or invalid settings never stop the viewer:
the problem is logged and the default is used instead.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import ViewerConstants

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewerSettings:
    """Preferences that change how frames are drawn."""
    filler_marker: str = ViewerConstants.FILLER_MARKER
    goodbye_message: str = ViewerConstants.GOODBYE_MESSAGE
    status_bar: bool = ViewerConstants.STATUS_BAR


class SettingsStore:
    """Loads ``ViewerSettings`` from the user's config directory."""

    def __init__(self, settings_file: Optional[Path] = None):
        if settings_file is None:
            config_dir = Path(platformdirs.user_config_dir(ViewerConstants.APP_NAME))
            settings_file = config_dir / ViewerConstants.SETTINGS_FILENAME
        self.settings_file = Path(settings_file)

    def _load_raw(self) -> Dict[str, Any]:
        """Read the settings file.

        Returns:
            The decoded JSON object, or an empty dict if the file is
            absent, unreadable or not an object.
        """
        if not self.settings_file.exists():
            return {}
        try:
            with open(self.settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self.settings_file}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            return {}
        return data

    def load(self) -> ViewerSettings:
        """Load settings, falling back to defaults for anything invalid."""
        raw = self._load_raw()
        known = {f.name for f in fields(ViewerSettings)}
        values = {}
        for key, value in raw.items():
            if key not in known:
                # Unknown settings are ignored (forward compatibility)
                continue
            if not validate_setting(key, value):
                logger.warning(f"Invalid value for setting {key!r}: {value!r}, using default")
                continue
            values[key] = value
        return ViewerSettings(**values)


def validate_setting(key: str, value: Any) -> bool:
    """Validate a setting value.

    Args:
        key: Setting key name.
        value: Setting value to validate.

    Returns:
        True if the value is acceptable for the key.
    """
    if key == 'filler_marker':
        return isinstance(value, str) and bool(value) and '\n' not in value
    if key == 'goodbye_message':
        return isinstance(value, str) and '\n' not in value
    if key == 'status_bar':
        return isinstance(value, bool)
    return True


def load_settings(settings_file: Optional[Path] = None) -> ViewerSettings:
    """Load settings from ``settings_file`` or the default location."""
    return SettingsStore(settings_file).load()
