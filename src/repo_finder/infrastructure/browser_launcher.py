"""Browser launcher: implements the Launcher port."""

from __future__ import annotations

import logging
import webbrowser

from rich.console import Console

logger = logging.getLogger(__name__)


class BrowserLauncher:
    """Opens URLs in the default browser, then clears the terminal."""

    def __init__(self, console: Console) -> None:
        self._console = console

    def open(self, url: str) -> None:
        try:
            opened = webbrowser.open(url, new=2)
        except webbrowser.Error:
            logger.debug("Browser launch failed for %s", url, exc_info=True)
            opened = False
        if not opened:
            logger.debug("No browser accepted %s", url)
        self._console.clear()
