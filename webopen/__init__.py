"""Open local files in a browser, detached from the calling process."""

__pkg_version__ = "0.1.0"

from .browser import LaunchCommand, Platform, get_browser_description, resolve_command, supported_browsers
from .config import get_configured_browser
from .launcher import LaunchError, SpawnOptions, open_in_browser
from .output import announce_open

__all__ = [
    "LaunchCommand",
    "LaunchError",
    "Platform",
    "SpawnOptions",
    "announce_open",
    "get_browser_description",
    "get_configured_browser",
    "open_in_browser",
    "resolve_command",
    "supported_browsers",
]
