"""User settings for takehome.

Settings are a small JSON object in settings.json. The only key read today
is ``tax_year``, the year every command uses when --year is not given.

The settings directory is TAKEHOME_CONFIG_PATH when set, otherwise
$XDG_CONFIG_HOME/takehome (~/.config/takehome). TAKEHOME_TAX_YEAR, when
set, takes precedence over the saved tax_year.
"""

import json
import os
from pathlib import Path
from typing import Any, Optional


APP_NAME = "takehome"
SETTINGS_FILENAME = "settings.json"
TAX_YEAR_ENV = "TAKEHOME_TAX_YEAR"


class InvalidTaxYearError(ValueError):
    """Raised when a configured tax year is not a whole number."""

    def __init__(self, source: str, value: Any):
        self.source = source
        self.value = value
        super().__init__(f"{source} must be a tax year like 2026, got {value!r}")


def get_config_dir() -> Path:
    """Directory holding settings.json (not created here)."""
    env_path = os.environ.get("TAKEHOME_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Saved settings, or {} before anything has been saved."""
    settings_file = get_settings_path()
    if not settings_file.exists():
        return {}

    with open(settings_file, "r") as f:
        return json.load(f)


def save_settings(settings: dict) -> Path:
    """Replace settings.json with `settings`, creating the directory if needed."""
    settings_file = get_settings_path()
    settings_file.parent.mkdir(parents=True, exist_ok=True)

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def get_setting(key: str, default: Any = None) -> Any:
    return load_settings().get(key, default)


def set_setting(key: str, value: Any) -> Path:
    """Update one key and return the path written."""
    settings = load_settings()
    settings[key] = value
    return save_settings(settings)


def _parse_year(source: str, value: Any) -> int:
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise InvalidTaxYearError(source, value)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidTaxYearError(source, value) from None


def get_default_tax_year() -> Optional[int]:
    """Configured default tax year, or None to use the latest available.

    Raises:
        InvalidTaxYearError: If TAKEHOME_TAX_YEAR or the saved tax_year is
            not a whole number
    """
    env_year = os.environ.get(TAX_YEAR_ENV)
    if env_year:
        return _parse_year(TAX_YEAR_ENV, env_year.strip())

    year = get_setting("tax_year")
    if year is None:
        return None
    return _parse_year(f"tax_year in {get_settings_path()}", year)
