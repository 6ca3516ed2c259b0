"""JSON file cache: implements the RepoCache port.

Layout under ``cache_dir``::

    <username>.json       one snapshot per user, overwritten wholesale
    current_user.json     the handle of the account the tool runs as
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from pydantic import BaseModel, ValidationError

from repo_finder.domain.entities import Repository
from repo_finder.domain.exceptions import CacheClearError, CacheWriteError

logger = logging.getLogger(__name__)

CURRENT_USER_FILE = "current_user.json"


# ── On-disk schemas ─────────────────────────────────────────────────────────


class RepositoryRecord(BaseModel):
    """Serialised form of a :class:`Repository`."""

    name: str
    url: str
    description: str | None = None
    stars: int = 0
    fork_from: str | None = None

    @classmethod
    def from_entity(cls, repo: Repository) -> RepositoryRecord:
        return cls(
            name=repo.name,
            url=repo.url,
            description=repo.description,
            stars=repo.stars,
            fork_from=repo.fork_from,
        )

    def to_entity(self) -> Repository:
        return Repository(
            name=self.name,
            url=self.url,
            description=self.description,
            stars=self.stars,
            fork_from=self.fork_from,
        )


class CacheSnapshot(BaseModel):
    username: str
    repositories: list[RepositoryRecord]


class CurrentUserRecord(BaseModel):
    github_handle: str


# ── Store ───────────────────────────────────────────────────────────────────


class JsonFileCache:
    """Per-username snapshots stored as JSON files in a single directory."""

    def __init__(self, cache_dir: Path) -> None:
        self._dir = cache_dir

    def snapshot_path(self, username: str) -> Path:
        return self._dir / f"{username}.json"

    def read(self, username: str) -> list[Repository] | None:
        path = self.snapshot_path(username)
        if not path.is_file():
            return None
        try:
            snapshot = CacheSnapshot.model_validate_json(path.read_text(encoding="utf-8"))
        except (OSError, ValidationError):
            logger.warning("Ignoring unreadable cache file %s", path, exc_info=True)
            return None
        return [record.to_entity() for record in snapshot.repositories]

    def write(self, username: str, repositories: list[Repository]) -> None:
        snapshot = CacheSnapshot(
            username=username,
            repositories=[RepositoryRecord.from_entity(r) for r in repositories],
        )
        self._write_text(self.snapshot_path(username), snapshot.model_dump_json())
        logger.debug("Cached %d repositories for %s", len(repositories), username)

    def clear(self) -> None:
        if not self._dir.exists():
            return
        try:
            shutil.rmtree(self._dir)
        except OSError as exc:
            raise CacheClearError(f"Could not clear cache at {self._dir}: {exc}") from exc

    def read_current_user(self) -> str | None:
        path = self._dir / CURRENT_USER_FILE
        if not path.is_file():
            return None
        try:
            record = CurrentUserRecord.model_validate_json(path.read_text(encoding="utf-8"))
        except (OSError, ValidationError):
            logger.warning("Ignoring unreadable current-user file %s", path, exc_info=True)
            return None
        return record.github_handle or None

    def write_current_user(self, handle: str) -> None:
        record = CurrentUserRecord(github_handle=handle)
        self._write_text(self._dir / CURRENT_USER_FILE, record.model_dump_json())

    def _write_text(self, path: Path, payload: str) -> None:
        try:
            self._dir.mkdir(parents=True, exist_ok=True)
            path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            raise CacheWriteError(f"Could not write {path}: {exc}") from exc
