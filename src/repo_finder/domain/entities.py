"""Domain entities: pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ListingSource(str, Enum):
    """Where a repository listing came from."""

    LOCAL = "local"
    REMOTE = "up-to-date"


@dataclass(frozen=True, slots=True)
class Repository:
    """A GitHub repository as returned by the listing endpoint."""

    name: str
    url: str
    description: str | None = None
    stars: int = 0
    fork_from: str | None = None  # parent full name, "" when unknown

    @property
    def is_fork(self) -> bool:
        return self.fork_from is not None


@dataclass(frozen=True, slots=True)
class FormattedRow:
    """A fixed-width display line paired with the repository it renders."""

    display_text: str
    repository: Repository


@dataclass(frozen=True, slots=True)
class Listing:
    """Repositories of one user plus the place they were loaded from."""

    username: str
    repositories: list[Repository]
    source: ListingSource
