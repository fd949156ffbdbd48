"""Configuration management for vntax.

Configuration lives in a single machine-specific file:

settings.json
   - rules_dir: directory holding custom rule files (tax/<year>.yaml,
     carriers.yaml) that replace the bundled ones
   - default_year: tax year used when a command does not name one

Config directory resolution:
1. VNTAX_CONFIG_PATH environment variable (if set)
2. ~/.config/vntax/ (XDG_CONFIG_HOME fallback)

Rules directory resolution:
1. VNTAX_RULES_PATH environment variable (if set)
2. settings.json "rules_dir" key
3. Bundled vntax/rules/ directory
"""

import json
import os
from pathlib import Path
from typing import Any


APP_NAME = "vntax"
SETTINGS_FILENAME = "settings.json"
BUNDLED_RULES_DIR = Path(__file__).parent.parent / "rules"


class SettingsError(ValueError):
    """Raised when settings.json exists but cannot be read."""
    pass


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. VNTAX_CONFIG_PATH environment variable
    2. ~/.config/vntax/ (XDG_CONFIG_HOME)

    Returns:
        Path to the configuration directory
    """
    env_path = os.environ.get("VNTAX_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Load machine-specific settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)

    Raises:
        SettingsError: settings.json is not a JSON object
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    try:
        with open(settings_file, "r") as f:
            settings = json.load(f)
    except json.JSONDecodeError as e:
        raise SettingsError(f"Invalid settings file {settings_file}: {e}") from e

    if not isinstance(settings, dict):
        raise SettingsError(f"Invalid settings file {settings_file}: expected a JSON object")
    return settings


def save_settings(settings: dict) -> Path:
    """Save machine-specific settings to settings.json.

    Args:
        settings: Settings dictionary to save

    Returns:
        Path to the saved settings file
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value from settings.json.

    Args:
        key: Setting key (e.g., "rules_dir", "default_year")
        default: Default value if key not found

    Returns:
        Setting value or default
    """
    settings = load_settings()
    return settings.get(key, default)


def set_setting(key: str, value: Any) -> Path:
    """Set a setting value in settings.json.

    Returns:
        Path to the saved settings file
    """
    settings = load_settings()
    settings[key] = value
    return save_settings(settings)


def clear_setting(key: str) -> bool:
    """Remove a setting. Returns True if it was present."""
    settings = load_settings()
    if key not in settings:
        return False
    del settings[key]
    save_settings(settings)
    return True


def get_rules_dir() -> Path:
    """Get the directory rule files are loaded from.

    Resolution order:
    1. VNTAX_RULES_PATH environment variable
    2. settings.json "rules_dir" key
    3. Bundled rules shipped with the package
    """
    env_path = os.environ.get("VNTAX_RULES_PATH")
    if env_path:
        return Path(env_path)

    custom = get_setting("rules_dir")
    if custom:
        return Path(custom).expanduser()

    return BUNDLED_RULES_DIR
