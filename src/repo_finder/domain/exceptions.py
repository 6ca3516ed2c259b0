"""Domain exception hierarchy.

Each exception maps to a terminal message and an exit code at the interface
layer.  Inner layers raise these; the CLI error handler translates them.
"""

from __future__ import annotations


class RepoFinderError(Exception):
    """Base exception for the entire application."""


# ── Username resolution ─────────────────────────────────────────────────────


class InvalidUsernameError(RepoFinderError):
    """The supplied name is not a valid GitHub handle."""


class NoLinkedAccountError(RepoFinderError):
    """No username was given and the current-user lookup found no account."""


# ── GitHub API errors ───────────────────────────────────────────────────────


class RepositoryListingError(RepoFinderError):
    """Listing repositories from GitHub failed (network, 404, rate limit, ...)."""


# ── Local cache errors ──────────────────────────────────────────────────────


class CacheWriteError(RepoFinderError):
    """A snapshot or current-user record could not be written."""


class CacheClearError(RepoFinderError):
    """The cache directory could not be removed."""


# ── Interactive session ─────────────────────────────────────────────────────


class SelectionCancelledError(RepoFinderError):
    """The user interrupted the prompt before picking a repository."""
