"""Port: URL launcher."""

from __future__ import annotations

from typing import Protocol


class Launcher(Protocol):
    """Opens a repository page outside the terminal."""

    def open(self, url: str) -> None:
        """Open *url* without waiting for the browser; never raises."""
        ...
