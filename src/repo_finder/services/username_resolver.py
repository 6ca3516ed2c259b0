"""Decide whose repositories to list."""

from __future__ import annotations

import logging

from repo_finder.domain.exceptions import (
    CacheWriteError,
    InvalidUsernameError,
    NoLinkedAccountError,
)
from repo_finder.domain.ports.repo_cache import RepoCache
from repo_finder.domain.ports.repo_lister import CurrentUserLookup
from repo_finder.domain.value_objects import GitHubUsername

logger = logging.getLogger(__name__)


class UsernameResolver:
    """Resolves a username from CLI input, the cache, or the current-user lookup.

    Precedence, highest first:

    1. the explicit positional argument;
    2. the value carried inline by the update flag;
    3. the cached current-user record (unless a refresh was requested);
    4. a fresh current-user lookup, which is then cached.
    """

    def __init__(self, cache: RepoCache, lookup: CurrentUserLookup) -> None:
        self._cache = cache
        self._lookup = lookup

    async def resolve(
        self,
        explicit: str | None = None,
        update_value: str | None = None,
        refresh_user: bool = False,
    ) -> str:
        if explicit:
            return GitHubUsername.from_string(explicit).value
        if update_value:
            return GitHubUsername.from_string(update_value).value

        if not refresh_user:
            cached = self._cache.read_current_user()
            if cached:
                try:
                    handle = GitHubUsername.from_string(cached).value
                except InvalidUsernameError:
                    logger.warning("Ignoring invalid cached current user %r", cached)
                else:
                    logger.debug("Using cached current user %s", handle)
                    return handle

        handle = await self._lookup.fetch_current_user()
        if not handle:
            raise NoLinkedAccountError(
                "No GitHub account is linked. Pass a username, or set GITHUB_TOKEN "
                "so the current user can be looked up."
            )

        try:
            self._cache.write_current_user(handle)
        except CacheWriteError as exc:
            logger.warning("Could not cache current user: %s", exc)
        return handle
