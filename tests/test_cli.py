"""End-to-end tests for the ``repos`` command with fake collaborators."""

from contextlib import asynccontextmanager

import pytest
from click.testing import CliRunner
from conftest import FakeGitHub, FakeLauncher

from rich.console import Console

from repo_finder.domain.exceptions import (
    CacheClearError,
    RepositoryListingError,
    SelectionCancelledError,
)
from repo_finder.infrastructure.json_cache import JsonFileCache
from repo_finder.interface import cli as cli_module
from repo_finder.interface.dependencies import Services
from repo_finder.services.list_repos import ListReposUseCase
from repo_finder.services.username_resolver import UsernameResolver


@pytest.fixture
def cache(tmp_path):
    return JsonFileCache(tmp_path / "cache")


@pytest.fixture
def launcher():
    return FakeLauncher()


@pytest.fixture
def prompts(monkeypatch):
    """Replace the interactive prompt: record titles, pick the first row."""
    titles = []

    async def fake_select(index, title, session=None):
        titles.append(title)
        return index.rows[0].repository

    monkeypatch.setattr(cli_module, "select_repository", fake_select)
    return titles


def _wire(monkeypatch, github, cache, launcher):
    @asynccontextmanager
    async def fake_open_services(settings, console):
        yield Services(
            resolver=UsernameResolver(cache=cache, lookup=github),
            list_repos=ListReposUseCase(repo_lister=github, cache=cache),
            launcher=launcher,
        )

    monkeypatch.setattr(cli_module, "open_services", fake_open_services)


def _invoke(*args):
    return CliRunner().invoke(cli_module.cli, list(args))


def test_lists_given_user_and_opens_selection(monkeypatch, cache, launcher, prompts, sample_repos):
    github = FakeGitHub(repos={"banminkyoz": sample_repos})
    _wire(monkeypatch, github, cache, launcher)

    result = _invoke("banminkyoz")

    assert result.exit_code == 0, result.output
    assert launcher.opened == ["https://github.com/someone/alpha"]
    assert prompts == ["Type to search repos (up-to-date): "]
    assert cache.read("banminkyoz") == sample_repos


def test_second_run_uses_local_cache(monkeypatch, cache, launcher, prompts, sample_repos):
    cache.write("banminkyoz", sample_repos)
    github = FakeGitHub()
    _wire(monkeypatch, github, cache, launcher)

    result = _invoke("banminkyoz")

    assert result.exit_code == 0, result.output
    assert github.fetched == []
    assert prompts == ["Type to search repos (local): "]


def test_update_flag_with_inline_user_forces_fetch(monkeypatch, cache, launcher, prompts, sample_repos):
    cache.write("banminkyoz", sample_repos[:1])
    github = FakeGitHub(repos={"banminkyoz": sample_repos})
    _wire(monkeypatch, github, cache, launcher)

    result = _invoke("-u", "banminkyoz")

    assert result.exit_code == 0, result.output
    assert github.fetched == ["banminkyoz"]
    assert cache.read("banminkyoz") == sample_repos


def test_bare_update_flag_refreshes_current_user_repos(monkeypatch, cache, launcher, prompts, sample_repos):
    cache.write_current_user("octocat")
    cache.write("octocat", [])
    github = FakeGitHub(repos={"octocat": sample_repos})
    _wire(monkeypatch, github, cache, launcher)

    result = _invoke("--update")

    assert result.exit_code == 0, result.output
    assert github.fetched == ["octocat"]
    assert github.lookups == 0


def test_update_user_flag_refreshes_current_user(monkeypatch, cache, launcher, prompts, sample_repos):
    cache.write_current_user("stale")
    github = FakeGitHub(repos={"fresh": sample_repos}, current_user="fresh")
    _wire(monkeypatch, github, cache, launcher)

    result = _invoke("-uu")

    assert result.exit_code == 0, result.output
    assert github.fetched == ["fresh"]
    assert cache.read_current_user() == "fresh"


def test_no_linked_account_exits_non_zero(monkeypatch, cache, launcher, prompts):
    _wire(monkeypatch, FakeGitHub(current_user=None), cache, launcher)

    result = _invoke()

    assert result.exit_code == 2
    assert "Error:" in result.output
    assert launcher.opened == []
    assert prompts == []


def test_fetch_failure_exits_non_zero(monkeypatch, cache, launcher, prompts):
    github = FakeGitHub(error=RepositoryListingError("GitHub user 'ghost' not found."))
    _wire(monkeypatch, github, cache, launcher)

    result = _invoke("ghost")

    assert result.exit_code == 3
    assert "not found" in result.output
    assert prompts == []


def test_empty_listing_skips_prompt(monkeypatch, cache, launcher, prompts):
    _wire(monkeypatch, FakeGitHub(repos={"newbie": []}), cache, launcher)

    result = _invoke("newbie")

    assert result.exit_code == 0
    assert "No repositories found" in result.output
    assert prompts == []


@pytest.mark.parametrize("flag", ["-cc", "--clearCache"])
def test_clear_cache_removes_directory(tmp_path, flag):
    cache = JsonFileCache(tmp_path / "cache")
    cache.write("octocat", [])
    cache.write_current_user("octocat")

    result = _invoke(flag)

    assert result.exit_code == 0
    assert "Cleared cache !" in result.output
    assert cache.read("octocat") is None
    assert not (tmp_path / "cache").exists()


def test_help_lists_examples():
    result = _invoke("--help")

    assert result.exit_code == 0
    assert "--updateUser" in result.output
    assert "repos banminkyoz" in result.output


def test_inline_update_value_forces_fetch(monkeypatch, cache, launcher, prompts, sample_repos):
    github = FakeGitHub(repos={"banminkyoz": sample_repos})
    _wire(monkeypatch, github, cache, launcher)

    result = _invoke("-u=banminkyoz")

    assert result.exit_code == 0, result.output
    assert github.fetched == ["banminkyoz"]


def test_invalid_username_exits_non_zero(monkeypatch, cache, launcher, prompts):
    github = FakeGitHub()
    _wire(monkeypatch, github, cache, launcher)

    result = _invoke("bad user")

    assert result.exit_code == 2
    assert "Error:" in result.output
    assert github.fetched == []
    assert prompts == []


def test_cancelled_prompt_exits_without_launch(monkeypatch, cache, launcher, sample_repos):
    async def cancel(index, title, session=None):
        raise SelectionCancelledError("Selection cancelled.")

    monkeypatch.setattr(cli_module, "select_repository", cancel)
    _wire(monkeypatch, FakeGitHub(repos={"banminkyoz": sample_repos}), cache, launcher)

    result = _invoke("banminkyoz")

    assert result.exit_code == 130
    assert launcher.opened == []


def test_clear_cache_failure_exits_non_zero(monkeypatch):
    def fail(self):
        raise CacheClearError("Could not clear cache: permission denied")

    monkeypatch.setattr(JsonFileCache, "clear", fail)

    result = _invoke("-cc")

    assert result.exit_code == 1
    assert "permission denied" in result.output
    assert "Cleared cache !" not in result.output


def test_rows_are_sized_to_the_console_width(monkeypatch, cache, launcher, sample_repos):
    seen = []

    async def capture(index, title, session=None):
        seen.extend(index.rows)
        return index.rows[0].repository

    monkeypatch.setattr(cli_module, "console", Console(width=100))
    monkeypatch.setattr(cli_module, "select_repository", capture)
    _wire(monkeypatch, FakeGitHub(repos={"banminkyoz": sample_repos}), cache, launcher)

    result = _invoke("banminkyoz")

    assert result.exit_code == 0, result.output
    assert cli_module.terminal_width() == 100
    assert all(len(row.display_text) == 12 + 1 + 58 + 1 + 6 + 1 + 13 for row in seen)
