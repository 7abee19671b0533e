# webopen/launcher.py
"""
Fire-and-forget launching of browser commands.
"""

import subprocess
import warnings
from dataclasses import dataclass
from typing import Any

from .browser import LaunchCommand, Platform, resolve_command
from .constants import DEFAULT_BROWSER, WINDOWS_CREATE_NEW_PROCESS_GROUP, WINDOWS_DETACHED_PROCESS


class LaunchError(Exception):
    """Raised when a launch command cannot be spawned."""

    def __init__(self, message: str, command: LaunchCommand | None = None):
        super().__init__(message)
        self.message = message
        self.command = command


@dataclass(frozen=True)
class SpawnOptions:
    """How a launched process relates to the process that started it.

    Attributes:
        detached: Child survives the caller exiting (own session/process group).
        silence_streams: Child's stdin/stdout/stderr go to the null device
                         instead of being inherited.
    """

    detached: bool = True
    silence_streams: bool = True

    def popen_kwargs(self, platform: Platform) -> dict[str, Any]:
        """Translate the options into keyword arguments for subprocess.Popen."""
        kwargs: dict[str, Any] = {"close_fds": True}
        if self.silence_streams:
            kwargs.update(stdin=subprocess.DEVNULL, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        if self.detached:
            if platform is Platform.WINDOWS:
                kwargs["creationflags"] = WINDOWS_DETACHED_PROCESS | WINDOWS_CREATE_NEW_PROCESS_GROUP
            else:
                kwargs["start_new_session"] = True
        return kwargs


DETACHED = SpawnOptions()


def spawn(command: LaunchCommand, options: SpawnOptions = DETACHED, platform: Platform | None = None) -> None:
    """
    Start a command without waiting for it.

    The Popen handle is dropped as soon as the process exists; nothing ever
    waits on the child or reads its exit status. Dropping a running Popen
    normally emits a ResourceWarning, which is suppressed here. On POSIX the
    exited child stays a zombie until the subprocess module reaps it on a
    later Popen call (or the caller exits).

    Args:
        command: The command to start.
        options: Lifecycle and stream settings for the child.
        platform: Platform to build spawn settings for. Defaults to the host.

    Raises:
        LaunchError: If the process could not be created (e.g. the
                     executable does not exist or is not executable).
    """
    platform = platform or Platform.current()
    try:
        process = subprocess.Popen(command.argv, **options.popen_kwargs(platform))
    except (OSError, ValueError) as e:
        raise LaunchError(f"Failed to launch '{command.command}': {e}", command) from e

    with warnings.catch_warnings():
        warnings.simplefilter("ignore", ResourceWarning)
        del process


def open_in_browser(file_path: str, browser: str | None = DEFAULT_BROWSER) -> bool:
    """
    Open a file in a browser.

    A True result only means the launch command was started. Whether the
    browser actually found and displayed the file is not observed, and the
    file path is not checked for existence.

    Args:
        file_path: Path to the file to open.
        browser: Browser to use (default, chrome, firefox, safari, edge, brave,
                 arc, chromium, or an absolute path to a browser executable).

    Returns:
        True if the spawn was issued, False otherwise.
    """
    try:
        platform = Platform.current()
        spawn(resolve_command(browser, file_path, platform), platform=platform)
        return True
    except Exception:
        # The caller decides how to report a failed launch
        return False
