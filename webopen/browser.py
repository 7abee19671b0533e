"""Browser command resolution.

Maps a browser preference and a target platform to the command that opens a
file in that browser. Nothing in this module starts processes.
"""

import enum
import os
import sys
from dataclasses import dataclass

from .constants import (
    DEFAULT_BROWSER,
    MACOS_APP_FLAG,
    MACOS_APPLICATIONS,
    MACOS_OPENER,
    UNIX_EXECUTABLES,
    UNIX_OPENER,
    WINDOWS_EMPTY_TITLE,
    WINDOWS_PROGRAMS,
    WINDOWS_SHELL,
    WINDOWS_SHELL_ARGS,
)


class Platform(enum.Enum):
    """Host platform families that need different launch commands."""

    MACOS = "macos"
    WINDOWS = "windows"
    OTHER = "other"

    @classmethod
    def current(cls) -> "Platform":
        """Return the platform family of the running interpreter."""
        if sys.platform == "darwin":
            return cls.MACOS
        if sys.platform in ("win32", "cygwin"):
            return cls.WINDOWS
        return cls.OTHER


@dataclass(frozen=True)
class LaunchCommand:
    """An executable and the arguments to pass to it."""

    command: str
    args: tuple[str, ...]

    @property
    def argv(self) -> list[str]:
        return [self.command, *self.args]


def is_custom_browser_path(browser: str | None) -> bool:
    """Check if a browser preference names an executable by absolute path."""
    if not browser:
        return False
    return browser.startswith("/") or browser.startswith("~") or os.path.isabs(browser)


def _normalize(browser: str | None) -> str:
    return browser.lower() if browser else DEFAULT_BROWSER


def _resolve_macos(name: str, file_path: str) -> LaunchCommand:
    application = MACOS_APPLICATIONS.get(name)
    if application is None:
        return LaunchCommand(MACOS_OPENER, (file_path,))
    return LaunchCommand(MACOS_OPENER, (MACOS_APP_FLAG, application, file_path))


def _resolve_windows(name: str, file_path: str) -> LaunchCommand:
    # Without a program token, the empty string fills the window title slot.
    program = WINDOWS_PROGRAMS.get(name, WINDOWS_EMPTY_TITLE)
    return LaunchCommand(WINDOWS_SHELL, (*WINDOWS_SHELL_ARGS, program, file_path))


def _resolve_unix(name: str, file_path: str) -> LaunchCommand:
    return LaunchCommand(UNIX_EXECUTABLES.get(name, UNIX_OPENER), (file_path,))


_RESOLVERS = {
    Platform.MACOS: _resolve_macos,
    Platform.WINDOWS: _resolve_windows,
    Platform.OTHER: _resolve_unix,
}

_BROWSER_TABLES = {
    Platform.MACOS: MACOS_APPLICATIONS,
    Platform.WINDOWS: WINDOWS_PROGRAMS,
    Platform.OTHER: UNIX_EXECUTABLES,
}


def resolve_command(browser: str | None, file_path: str, platform: Platform) -> LaunchCommand:
    """
    Build the command that opens a file in the preferred browser.

    An absolute path is used as the executable itself on every platform, even
    when it matches a reserved browser name. Reserved names are matched
    case-insensitively; anything unrecognized falls back to the platform's
    default opener instead of failing.

    Args:
        browser: Reserved browser name, absolute path to a browser executable,
                 or None/empty for the system default.
        file_path: Path of the file to open. Always the last argument.
        platform: Platform to build the command for.

    Returns:
        The LaunchCommand to spawn.
    """
    if is_custom_browser_path(browser):
        return LaunchCommand(browser, (file_path,))
    return _RESOLVERS[platform](_normalize(browser), file_path)


def supported_browsers(platform: Platform) -> tuple[str, ...]:
    """Return the reserved browser names recognized on a platform, 'default' first."""
    return (DEFAULT_BROWSER, *_BROWSER_TABLES[platform])


def get_browser_description(browser: str | None) -> str:
    """Get a human-readable browser description for logging."""
    if not browser or browser == DEFAULT_BROWSER:
        return "default browser"
    if is_custom_browser_path(browser):
        return f"custom browser ({browser})"
    return browser
