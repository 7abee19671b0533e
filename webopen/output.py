"""Console reporting around browser launches."""

from rich.console import Console
from rich.markup import escape

from .browser import get_browser_description
from .config import get_configured_browser
from .launcher import open_in_browser


def announce_open(file_path: str, browser: str | None = None, console: Console | None = None) -> bool:
    """Open a file in a browser and tell the user what happened.

    Args:
        file_path: Path to the file to open.
        browser: Browser preference. When None, the configured preference is used
                 (see `config.get_configured_browser`).
        console: Rich console instance for output.

    Returns:
        The result of `open_in_browser`.
    """
    console = console or Console()
    if browser is None:
        browser = get_configured_browser()

    description = escape(get_browser_description(browser))
    shown_path = escape(file_path)
    console.print(f"[dim]Opening {shown_path} in {description}...[/]")

    if open_in_browser(file_path, browser):
        return True

    console.print(f"[bold yellow]Warning:[/] Could not launch {description}.")
    console.print(f"[dim]Open the file manually:[/] {shown_path}")
    return False
