"""Port: local repository cache."""

from __future__ import annotations

from typing import Protocol

from repo_finder.domain.entities import Repository


class RepoCache(Protocol):
    """Abstract contract for the on-disk snapshot store."""

    def read(self, username: str) -> list[Repository] | None:
        """Return the cached snapshot for *username*, or ``None`` if absent."""
        ...

    def write(self, username: str, repositories: list[Repository]) -> None:
        """Overwrite the snapshot for *username*."""
        ...

    def clear(self) -> None:
        """Remove every snapshot and the current-user record."""
        ...

    def read_current_user(self) -> str | None:
        """Return the cached current-user handle, or ``None`` if absent."""
        ...

    def write_current_user(self, handle: str) -> None:
        """Overwrite the cached current-user handle."""
        ...
