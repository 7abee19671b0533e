# webopen/config.py
"""Browser preference configuration for webopen.

This module handles:
- The WEBOPEN_BROWSER environment override
- Persisting a preferred browser in the user's config directory
"""

import os
import pathlib
import json
import stat

from .constants import DEFAULT_BROWSER


CONFIG_DIR = pathlib.Path.home() / ".config" / "webopen"
CONFIG_FILE = CONFIG_DIR / "config.json"
BROWSER_ENV_VAR = "WEBOPEN_BROWSER"


def ensure_config_dir():
    """Ensures the configuration directory exists."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    try:
        os.chmod(CONFIG_DIR, stat.S_IRWXU)  # Read/Write/Execute for owner only
    except OSError as e:
        print(f"Warning: Could not set permissions on {CONFIG_DIR}: {e}")


def load_browser_preference() -> str | None:
    """Loads the saved browser preference, if any."""
    if not CONFIG_FILE.exists():
        return None
    try:
        with open(CONFIG_FILE, "r") as f:
            config = json.load(f)
    except (IOError, json.JSONDecodeError, OSError) as e:
        print(f"Warning: Unable to read config file at {CONFIG_FILE}: {e}")
        return None

    browser = config.get("browser") if isinstance(config, dict) else None
    if browser is not None and not isinstance(browser, str):
        print(f"Warning: Ignoring non-string 'browser' value in {CONFIG_FILE}")
        return None
    return browser or None


def save_browser_preference(browser: str):
    """Saves the preferred browser."""
    ensure_config_dir()
    try:
        with open(CONFIG_FILE, "w") as f:
            json.dump({"browser": browser}, f)
        os.chmod(CONFIG_FILE, stat.S_IRUSR | stat.S_IWUSR)
    except OSError as e:
        print(f"Error: Unable to save config file at {CONFIG_FILE}: {e}")


def clear_browser_preference():
    """Removes the saved browser preference."""
    if not CONFIG_FILE.exists():
        return
    try:
        os.remove(CONFIG_FILE)
    except OSError as e:
        print(f"Error: Unable to remove config file at {CONFIG_FILE}: {e}")


def get_configured_browser() -> str:
    """Gets the browser preference to use when the caller did not pick one.

    Priority: WEBOPEN_BROWSER environment variable > saved config > 'default'.

    Returns:
        A browser preference string.
    """
    from_env = os.getenv(BROWSER_ENV_VAR)
    if from_env:
        return from_env
    return load_browser_preference() or DEFAULT_BROWSER
