"""Port: repository lister: defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from repo_finder.domain.entities import Repository


class RepoLister(Protocol):
    """Abstract contract for the remote repository listing service."""

    async def fetch_repositories(self, username: str) -> list[Repository]:
        """Return every repository owned by *username*, in provider order."""
        ...


class CurrentUserLookup(Protocol):
    """Abstract contract for finding the account the tool runs as."""

    async def fetch_current_user(self) -> str | None:
        """Return the linked GitHub handle, or ``None`` when there is none."""
        ...
