"""User configuration for the hacksaw editor.

Settings are read from a JSON file in the OS-appropriate config
directory (or the file named by ``HACKSAW_CONFIG``). A missing or broken
file never stops the editor: invalid values fall back to defaults and a
warning is logged.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "HACKSAW_CONFIG"
SETTINGS_FILENAME = "settings.json"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Resolved editor settings."""
    message_timeout: float = EditorConstants.MESSAGE_TIMEOUT
    log_level: str = "WARNING"
    status_color: tuple[int, int, int] = EditorConstants.STATUS_FG_COLOR


def default_settings_path() -> Path:
    """Return the settings file location, honouring ``HACKSAW_CONFIG``."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return Path(platformdirs.user_config_dir("hacksaw")) / SETTINGS_FILENAME


def _valid_timeout(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0


def _valid_log_level(value: Any) -> bool:
    return isinstance(value, str) and value.upper() in _LOG_LEVELS


def _valid_color(value: Any) -> bool:
    return (
        isinstance(value, list)
        and len(value) == 3
        and all(isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255 for c in value)
    )


def _read_settings_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
        logger.warning(f"Could not load settings from {path}: {e}")
        return {}
    if not isinstance(data, dict):
        logger.warning("Settings file has invalid format (not a dict), ignoring")
        return {}
    return data


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from ``path`` (default: :func:`default_settings_path`).

    Unknown keys are ignored. Loading never raises.
    """
    if path is None:
        path = default_settings_path()
    data = _read_settings_file(Path(path))
    defaults = Settings()
    values: Dict[str, Any] = {}

    if 'message_timeout' in data:
        if _valid_timeout(data['message_timeout']):
            values['message_timeout'] = float(data['message_timeout'])
        else:
            logger.warning(f"Invalid message_timeout {data['message_timeout']!r}, "
                           f"using {defaults.message_timeout}")
    if 'log_level' in data:
        if _valid_log_level(data['log_level']):
            values['log_level'] = data['log_level'].upper()
        else:
            logger.warning(f"Invalid log_level {data['log_level']!r}, using {defaults.log_level}")
    if 'status_color' in data:
        if _valid_color(data['status_color']):
            values['status_color'] = tuple(data['status_color'])
        else:
            logger.warning(f"Invalid status_color {data['status_color']!r}, "
                           f"using {list(defaults.status_color)}")

    return Settings(**values)
