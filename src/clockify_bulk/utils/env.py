"""Environment-aware locations and dates.

Directories follow the XDG Base Directory specification: an absolute
XDG_CONFIG_HOME / XDG_CACHE_HOME wins, anything else falls back under HOME.
"""

import logging
import os
from datetime import date, datetime
from pathlib import Path

logger = logging.getLogger(__name__)

APP_NAME = "clockify-bulk"
FAKE_DATE_VAR = "CLOCKIFY_BULK_FAKE_DATE"


def get_home_dir() -> Path:
    """Home directory, honouring HOME before the platform default."""
    home = os.environ.get("HOME")
    return Path(home) if home else Path.home()


def config_dir_for_home(home_dir: Path) -> Path:
    """~/.config/clockify-bulk for the given home directory."""
    return home_dir / ".config" / APP_NAME


def cache_dir_for_home(home_dir: Path) -> Path:
    """~/.cache/clockify-bulk for the given home directory."""
    return home_dir / ".cache" / APP_NAME


def _xdg_app_dir(var_name: str) -> Path | None:
    """Application directory under an XDG variable, if it is usable.

    Relative values are ignored as the XDG specification requires.
    """
    value = os.environ.get(var_name)
    if not value:
        return None
    base = Path(value)
    if not base.is_absolute():
        logger.warning(
            "%s contains relative path '%s' which violates "
            "XDG Base Directory specification. Ignoring and using default.",
            var_name,
            value,
        )
        return None
    return base / APP_NAME


def get_config_dir() -> Path:
    """Directory holding settings.yaml."""
    return _xdg_app_dir("XDG_CONFIG_HOME") or config_dir_for_home(get_home_dir())


def get_cache_dir() -> Path:
    """Directory holding the log file."""
    return _xdg_app_dir("XDG_CACHE_HOME") or cache_dir_for_home(get_home_dir())


def get_today() -> date:
    """Today's date, or CLOCKIFY_BULK_FAKE_DATE (YYYY-MM-DD) when set.

    The override picks the default month and year in tests; an unparsable
    value is logged and ignored.
    """
    fake_date = os.environ.get(FAKE_DATE_VAR)
    if not fake_date:
        return date.today()
    try:
        return datetime.strptime(fake_date, "%Y-%m-%d").date()
    except ValueError:
        logger.warning(
            "Invalid %s '%s' (expected YYYY-MM-DD). Using real date.",
            FAKE_DATE_VAR,
            fake_date,
        )
        return date.today()
