"""Persistent default text style.

Default TextProps values can be overridden by a JSON file stored in the
user's config directory, so that documents rendered on one machine share a
house style without every caller spelling it out.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import Align, FontStyle
from .props import Color, TextProps

logger = logging.getLogger(__name__)

SETTING_KEYS = ('family', 'style', 'size', 'color', 'align', 'vertical_padding', 'extrapolate')


class TextDefaults:
    """Loads and saves default text style overrides.

    Settings are stored as a flat JSON object in ``settings.json``; keys
    are TextProps field names, colors are [r, g, b] lists.
    """

    def __init__(self, config_dir: Optional[Path] = None):
        """Initialize settings storage.

        Args:
            config_dir: Directory holding settings.json. Defaults to the
                platform config directory for celltext.
        """
        self._config_dir = Path(config_dir or platformdirs.user_config_dir("celltext"))
        self._settings_file = self._config_dir / "settings.json"
        self._settings_cache: Optional[Dict[str, Any]] = None

    def _ensure_config_dir(self) -> None:
        """Ensure the config directory exists."""
        try:
            self._config_dir.mkdir(parents=True, exist_ok=True)
        except (OSError, PermissionError) as e:
            logger.warning(f"Could not create config directory {self._config_dir}: {e}")

    def load_settings(self) -> Dict[str, Any]:
        """Load raw settings from disk.

        Returns:
            Dictionary of settings. Empty dict if the file doesn't exist,
            can't be read or isn't a JSON object.
        """
        if self._settings_cache is not None:
            return dict(self._settings_cache)

        if not self._settings_file.exists():
            self._settings_cache = {}
            return {}

        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError, PermissionError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            self._settings_cache = {}
            return {}

        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            self._settings_cache = {}
            return {}

        valid = {}
        for key, value in data.items():
            if self.validate_setting(key, value):
                valid[key] = value
            else:
                logger.warning(f"Ignoring invalid setting {key}={value!r}")
        self._settings_cache = valid
        return dict(valid)

    def save_settings(self, settings: Dict[str, Any]) -> bool:
        """Save settings to disk atomically.

        Returns:
            True if save was successful, False otherwise.
        """
        self._ensure_config_dir()

        temp_file = self._settings_file.with_suffix('.tmp')
        try:
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(settings, f, indent=2)
            temp_file.replace(self._settings_file)
            self._settings_cache = dict(settings)
            return True
        except (OSError, PermissionError) as e:
            logger.warning(f"Could not save settings to {self._settings_file}: {e}")
            try:
                if temp_file.exists():
                    temp_file.unlink()
            except OSError:
                pass
            return False

    def load_props(self) -> TextProps:
        """Build TextProps from the built-in defaults and the saved overrides."""
        settings = self.load_settings()
        overrides: Dict[str, Any] = {}
        for key, value in settings.items():
            if key == 'color':
                overrides[key] = Color(*value)
            elif key == 'style':
                overrides[key] = FontStyle(value)
            elif key == 'align':
                overrides[key] = Align(value)
            elif key in SETTING_KEYS:
                overrides[key] = value
        return TextProps(**overrides).make_valid()

    def save_props(self, props: TextProps) -> bool:
        """Save every field of props as the new defaults."""
        data = asdict(props)
        data['family'] = getattr(props.family, 'value', props.family)
        data['style'] = getattr(props.style, 'value', props.style)
        data['align'] = getattr(props.align, 'value', props.align)
        data['color'] = [props.color.red, props.color.green, props.color.blue]
        return self.save_settings(data)

    def validate_setting(self, key: str, value: Any) -> bool:
        """Validate a setting value.

        Unknown keys are considered valid (forward compatibility); they are
        ignored when building TextProps.
        """
        if value is None:
            return False

        if key == 'family':
            return isinstance(value, str) and bool(value)

        if key == 'style':
            return value in [s.value for s in FontStyle]

        if key == 'align':
            return value in [a.value for a in Align]

        if key in ('size', 'vertical_padding'):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                return False
            return value > 0 if key == 'size' else value >= 0

        if key == 'extrapolate':
            return isinstance(value, bool)

        if key == 'color':
            return (isinstance(value, list) and len(value) == 3
                    and all(isinstance(c, int) and 0 <= c <= 255 for c in value))

        return True

    def clear_cache(self) -> None:
        """Clear the in-memory cache of settings."""
        self._settings_cache = None


# Global instance
_defaults: Optional[TextDefaults] = None


def get_defaults() -> TextDefaults:
    """Get the global TextDefaults instance."""
    global _defaults
    if _defaults is None:
        _defaults = TextDefaults()
    return _defaults
