"""List-repositories use case: cache first, GitHub on a miss or forced update."""

from __future__ import annotations

import logging

from repo_finder.domain.entities import Listing, ListingSource
from repo_finder.domain.exceptions import CacheWriteError
from repo_finder.domain.ports.repo_cache import RepoCache
from repo_finder.domain.ports.repo_lister import RepoLister

logger = logging.getLogger(__name__)


class ListReposUseCase:
    """Loads the repositories of one user.

    Parameters
    ----------
    repo_lister:
        Adapter that lists repositories from GitHub.
    cache:
        Local snapshot store.
    """

    def __init__(self, repo_lister: RepoLister, cache: RepoCache) -> None:
        self._lister = repo_lister
        self._cache = cache

    async def execute(self, username: str, force_update: bool = False) -> Listing:
        """Return the listing for *username*.

        A forced update skips the cache read, fetches, and always rewrites the
        snapshot.  A failed cache write is logged and the fetched list is still
        returned.
        """
        if not force_update:
            cached = self._cache.read(username)
            if cached is not None:
                logger.info("Loaded %d repositories for %s from cache", len(cached), username)
                return Listing(username=username, repositories=cached, source=ListingSource.LOCAL)

        repositories = await self._lister.fetch_repositories(username)

        try:
            self._cache.write(username, repositories)
        except CacheWriteError as exc:
            logger.warning("Could not cache repositories for %s: %s", username, exc)

        return Listing(username=username, repositories=repositories, source=ListingSource.REMOTE)
