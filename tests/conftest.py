"""Shared fixtures and in-memory fakes."""

from __future__ import annotations

import pytest

from repo_finder.domain.entities import Repository
from repo_finder.domain.exceptions import CacheWriteError
from repo_finder.infrastructure.config import get_settings


def make_repo(
    name: str,
    stars: int = 0,
    description: str | None = None,
    fork_from: str | None = None,
) -> Repository:
    return Repository(
        name=name,
        url=f"https://github.com/someone/{name}",
        description=description,
        stars=stars,
        fork_from=fork_from,
    )


class FakeCache:
    """In-memory RepoCache."""

    def __init__(self, fail_writes: bool = False) -> None:
        self.snapshots: dict[str, list[Repository]] = {}
        self.current_user: str | None = None
        self.fail_writes = fail_writes
        self.writes = 0

    def read(self, username: str) -> list[Repository] | None:
        return self.snapshots.get(username)

    def write(self, username: str, repositories: list[Repository]) -> None:
        self.writes += 1
        if self.fail_writes:
            raise CacheWriteError("disk full")
        self.snapshots[username] = list(repositories)

    def clear(self) -> None:
        self.snapshots.clear()
        self.current_user = None

    def read_current_user(self) -> str | None:
        return self.current_user

    def write_current_user(self, handle: str) -> None:
        if self.fail_writes:
            raise CacheWriteError("disk full")
        self.current_user = handle


class FakeGitHub:
    """RepoLister + CurrentUserLookup returning canned data."""

    def __init__(
        self,
        repos: dict[str, list[Repository]] | None = None,
        current_user: str | None = None,
        error: Exception | None = None,
    ) -> None:
        self.repos = repos or {}
        self.current_user = current_user
        self.error = error
        self.fetched: list[str] = []
        self.lookups = 0

    async def fetch_repositories(self, username: str) -> list[Repository]:
        self.fetched.append(username)
        if self.error is not None:
            raise self.error
        return list(self.repos.get(username, []))

    async def fetch_current_user(self) -> str | None:
        self.lookups += 1
        return self.current_user


class FakeLauncher:
    def __init__(self) -> None:
        self.opened: list[str] = []

    def open(self, url: str) -> None:
        self.opened.append(url)


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch, tmp_path):
    """Point the cache at a temp dir and drop cached settings around each test."""
    monkeypatch.setenv("REPOS_CACHE_DIR", str(tmp_path / "cache"))
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("REPOS_GITHUB_TOKEN", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_repos() -> list[Repository]:
    return [
        make_repo("alpha", stars=5, description="short"),
        make_repo("alphabet", stars=100, fork_from="x"),
        make_repo("dotfiles", stars=1, description="My shell and editor configuration"),
    ]
