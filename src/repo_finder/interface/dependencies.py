"""Dependency wiring for one CLI session."""

from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator

import httpx
from rich.console import Console

from repo_finder.domain.ports.launcher import Launcher
from repo_finder.infrastructure.browser_launcher import BrowserLauncher
from repo_finder.infrastructure.config import Settings
from repo_finder.infrastructure.github_rest_adapter import GitHubRestAdapter
from repo_finder.infrastructure.json_cache import JsonFileCache
from repo_finder.services.list_repos import ListReposUseCase
from repo_finder.services.username_resolver import UsernameResolver


@dataclass(frozen=True)
class Services:
    """Everything the session needs, built around one shared HTTP client."""

    resolver: UsernameResolver
    list_repos: ListReposUseCase
    launcher: Launcher


def build_cache(settings: Settings) -> JsonFileCache:
    return JsonFileCache(settings.cache_dir)


@asynccontextmanager
async def open_services(settings: Settings, console: Console) -> AsyncIterator[Services]:
    """Open the HTTP client, wire the adapters, and close the client on exit."""
    token = settings.github_token.get_secret_value() if settings.github_token else None
    async with httpx.AsyncClient(timeout=httpx.Timeout(settings.http_timeout)) as client:
        github_adapter = GitHubRestAdapter(
            client=client, token=token, api_url=settings.github_api_url
        )
        cache = build_cache(settings)
        yield Services(
            resolver=UsernameResolver(cache=cache, lookup=github_adapter),
            list_repos=ListReposUseCase(repo_lister=github_adapter, cache=cache),
            launcher=BrowserLauncher(console),
        )
