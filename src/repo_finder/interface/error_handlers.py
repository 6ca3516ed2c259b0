"""Translate domain errors into terminal messages and exit codes."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.markup import escape

from repo_finder.domain.exceptions import (
    CacheClearError,
    CacheWriteError,
    InvalidUsernameError,
    NoLinkedAccountError,
    RepoFinderError,
    RepositoryListingError,
    SelectionCancelledError,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_NO_USER = 2
EXIT_FETCH_FAILED = 3
EXIT_CANCELLED = 130

_EXCEPTION_EXIT_CODES: list[tuple[type[RepoFinderError], int]] = [
    (InvalidUsernameError, EXIT_NO_USER),
    (NoLinkedAccountError, EXIT_NO_USER),
    (RepositoryListingError, EXIT_FETCH_FAILED),
    (CacheClearError, EXIT_FAILURE),
    (CacheWriteError, EXIT_FAILURE),
    (SelectionCancelledError, EXIT_CANCELLED),
]


def exit_code_for(exc: RepoFinderError) -> int:
    for exc_type, code in _EXCEPTION_EXIT_CODES:
        if isinstance(exc, exc_type):
            return code
    return EXIT_FAILURE


def report_error(console: Console, exc: RepoFinderError) -> int:
    """Print *exc* for the user and return the exit code to use."""
    code = exit_code_for(exc)
    if isinstance(exc, SelectionCancelledError):
        logger.debug("Prompt cancelled")
        return code

    logger.warning("%s: %s", type(exc).__name__, exc)
    console.print(f"[red]Error:[/red] {escape(str(exc))}")
    return code
