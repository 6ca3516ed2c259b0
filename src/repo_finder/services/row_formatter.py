"""Row formatting: turn repositories into fixed-width display lines.

Columns, left to right::

    name | description | fork marker | stars

The name column grows with the longest repository name, the fork and star
columns are fixed, and the description takes whatever terminal width is left.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from rich.cells import cell_len

from repo_finder.domain.entities import FormattedRow, Repository

# ── Constants ───────────────────────────────────────────────────────────────

MIN_NAME_WIDTH = 10
NAME_PADDING = 2
FORK_WIDTH = 6
STAR_WIDTH = 14
COLUMN_PADDING = 10  # reserved for separators and the prompt gutter

FORK_MARKER = "(Fork)"
STAR_GLYPH = "⭐"
ELLIPSIS = "..."
COLUMN_SEPARATOR = " "

_NON_PRINTABLE_RE = re.compile(r"[^ -~]+")


@dataclass(frozen=True, slots=True)
class ColumnLayout:
    """Column widths computed for one listing."""

    name: int
    description: int
    fork: int = FORK_WIDTH
    star: int = STAR_WIDTH


# ── Public helpers ──────────────────────────────────────────────────────────


def compute_layout(repositories: list[Repository], terminal_width: int) -> ColumnLayout:
    """Size the columns for *repositories* on a terminal *terminal_width* wide."""
    longest = max((len(repo.name) for repo in repositories), default=0)
    name_width = max(MIN_NAME_WIDTH, longest) + NAME_PADDING
    description_width = terminal_width - name_width - FORK_WIDTH - STAR_WIDTH - COLUMN_PADDING
    return ColumnLayout(name=name_width, description=max(description_width, 0))


def sanitize_description(text: str | None) -> str:
    """Drop everything outside printable ASCII (emoji, control chars, ...)."""
    if not text:
        return ""
    return _NON_PRINTABLE_RE.sub("", text)


def truncate_description(text: str, width: int) -> str:
    """Fit *text* into *width* characters, ending with ``...`` when cut."""
    if len(text) <= width:
        return text
    if width < len(ELLIPSIS):
        return ELLIPSIS[:width]
    return text[: width - len(ELLIPSIS)] + ELLIPSIS


def format_stars(stars: int) -> str:
    return f"{stars} {STAR_GLYPH}"


def format_rows(repositories: list[Repository], terminal_width: int) -> list[FormattedRow]:
    """Render every repository as a :class:`FormattedRow`, keeping input order."""
    layout = compute_layout(repositories, terminal_width)
    return [
        FormattedRow(display_text=_render(repo, layout), repository=repo)
        for repo in repositories
    ]


# ── Rendering ───────────────────────────────────────────────────────────────


def _render(repo: Repository, layout: ColumnLayout) -> str:
    description = truncate_description(sanitize_description(repo.description), layout.description)
    columns = [
        _pad(repo.name, layout.name),
        _pad(description, layout.description),
        _pad(FORK_MARKER if repo.is_fork else "", layout.fork),
        _pad(format_stars(repo.stars), layout.star, align_right=True),
    ]
    return COLUMN_SEPARATOR.join(columns)


def _pad(text: str, width: int, align_right: bool = False) -> str:
    """Pad *text* to *width* terminal cells (wide glyphs count as two)."""
    fill = " " * max(width - cell_len(text), 0)
    return fill + text if align_right else text + fill
