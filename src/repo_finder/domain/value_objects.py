"""Value objects: self-validating domain primitives."""

from __future__ import annotations

import re
from dataclasses import dataclass

from repo_finder.domain.exceptions import InvalidUsernameError

_USERNAME_RE = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9]|-(?=[A-Za-z0-9])){0,38}$")


@dataclass(frozen=True, slots=True)
class GitHubUsername:
    """Validated GitHub handle.

    GitHub allows up to 39 alphanumeric characters or single hyphens, and a
    handle cannot begin or end with a hyphen.
    """

    value: str

    @classmethod
    def from_string(cls, raw: str) -> GitHubUsername:
        """Parse and validate a raw handle (a leading ``@`` is accepted)."""
        name = raw.strip().removeprefix("@")
        if not _USERNAME_RE.match(name):
            raise InvalidUsernameError(
                f"Invalid GitHub username: '{raw}'. "
                "Use letters, digits and single hyphens (max 39 characters)."
            )
        return cls(value=name)

    def __str__(self) -> str:
        return self.value
