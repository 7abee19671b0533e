# webopen/constants.py
"""
Constants for the webopen package.
"""

# Preference used when none is given
DEFAULT_BROWSER = "default"

# macOS: reserved name -> application name passed to `open -a`
MACOS_OPENER = "open"
MACOS_APP_FLAG = "-a"
MACOS_APPLICATIONS = {
    "chrome": "Google Chrome",
    "firefox": "Firefox",
    "safari": "Safari",
    "edge": "Microsoft Edge",
    "brave": "Brave Browser",
    "arc": "Arc",
}

# Windows: reserved name -> program token for the `start` verb of cmd.exe
WINDOWS_SHELL = "cmd"
WINDOWS_SHELL_ARGS = ("/c", "start")
WINDOWS_PROGRAMS = {
    "chrome": "chrome",
    "firefox": "firefox",
    "edge": "msedge",
    "brave": "brave",
}
# `start` treats its first quoted argument as the window title, so the
# default case needs an explicit empty title before the file path.
WINDOWS_EMPTY_TITLE = ""

# Linux and other Unix-likes: reserved name -> executable
UNIX_OPENER = "xdg-open"
UNIX_EXECUTABLES = {
    "chrome": "google-chrome",
    "chromium": "chromium",
    "firefox": "firefox",
    "brave": "brave-browser",
}

# Windows process creation flags (winbase.h), defined here so spawn options
# can be built on any host
WINDOWS_DETACHED_PROCESS = 0x00000008
WINDOWS_CREATE_NEW_PROCESS_GROUP = 0x00000200
