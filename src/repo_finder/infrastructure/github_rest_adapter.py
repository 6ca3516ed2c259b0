"""GitHub REST API adapter: implements the RepoLister and CurrentUserLookup ports."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

import httpx

from repo_finder.domain.entities import Repository
from repo_finder.domain.exceptions import RepositoryListingError

logger = logging.getLogger(__name__)

_PER_PAGE = 100


class GitHubRestAdapter:
    """Concrete repository lister backed by the GitHub v3 REST API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        token: str | None = None,
        api_url: str = "https://api.github.com",
    ) -> None:
        self._client = client
        self._api_url = api_url.rstrip("/")
        self._token = token
        self._api_headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": "repo-finder/1.0",
        }
        if token:
            self._api_headers["Authorization"] = f"Bearer {token}"

    async def fetch_repositories(self, username: str) -> list[Repository]:
        """GET /users/{username}/repos, page by page → [Repository]."""
        repositories: list[Repository] = []
        page = 1
        while True:
            resp = await self._api_get(
                f"/users/{username}/repos",
                params={"per_page": str(_PER_PAGE), "page": str(page)},
                not_found=f"GitHub user '{username}' not found.",
            )
            batch: list[dict[str, Any]] = resp.json()
            repositories.extend(_to_repository(item) for item in batch)
            if len(batch) < _PER_PAGE:
                break
            page += 1

        logger.info("Fetched %d repositories for %s", len(repositories), username)
        return repositories

    async def fetch_current_user(self) -> str | None:
        """GET /user → login of the token owner, or None when unauthenticated."""
        if not self._token:
            logger.debug("No GitHub token configured, cannot look up current user")
            return None

        url = f"{self._api_url}/user"
        try:
            resp = await self._client.get(url, headers=self._api_headers)
        except httpx.HTTPError as exc:
            raise RepositoryListingError(
                f"Network error fetching {url}: {exc}"
            ) from exc

        if resp.status_code == 401:
            logger.warning("GitHub rejected the configured token (HTTP 401)")
            return None
        if resp.status_code != 200:
            raise RepositoryListingError(
                f"GitHub API returned HTTP {resp.status_code} for {url}"
            )

        login = resp.json().get("login")
        return login or None

    async def _api_get(
        self,
        endpoint: str,
        params: dict[str, str] | None = None,
        not_found: str = "Resource not found.",
    ) -> httpx.Response:
        """Perform a GitHub API GET request with error translation."""
        url = f"{self._api_url}{endpoint}"
        try:
            resp = await self._client.get(
                url, headers=self._api_headers, params=params
            )
        except httpx.HTTPError as exc:
            raise RepositoryListingError(
                f"Network error fetching {url}: {exc}"
            ) from exc

        if resp.status_code == 200:
            return resp

        if resp.status_code == 404:
            raise RepositoryListingError(not_found)

        if resp.status_code in (403, 429):
            remaining = resp.headers.get("x-ratelimit-remaining", "")
            if remaining == "0" or resp.status_code == 429:
                reset_raw = resp.headers.get("x-ratelimit-reset", "")
                try:
                    reset_str = datetime.fromtimestamp(int(reset_raw), tz=timezone.utc).strftime(
                        "%Y-%m-%d %H:%M:%S UTC"
                    )
                except (ValueError, OSError):
                    reset_str = reset_raw or "unknown"
                raise RepositoryListingError(
                    f"GitHub API rate limit exceeded. Resets at {reset_str}. "
                    "Set the GITHUB_TOKEN environment variable to increase the limit."
                )
            raise RepositoryListingError("Access denied by the GitHub API.")

        raise RepositoryListingError(
            f"GitHub API returned HTTP {resp.status_code} for {url}"
        )


def _to_repository(item: dict[str, Any]) -> Repository:
    fork_from: str | None = None
    if item.get("fork"):
        parent = item.get("parent") or item.get("source") or {}
        fork_from = parent.get("full_name", "")
    return Repository(
        name=item["name"],
        url=item["html_url"],
        description=item.get("description"),
        stars=item.get("stargazers_count", 0),
        fork_from=fork_from,
    )
