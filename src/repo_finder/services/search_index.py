"""Fuzzy search over formatted rows, keyed on repository name.

Scoring follows the Bitap-style convention: ``0.0`` is a perfect match at the
start of the name and ``1.0`` matches anything.  A row is accepted when its
score does not exceed :data:`THRESHOLD`.
"""

from __future__ import annotations

from dataclasses import dataclass

from rapidfuzz import fuzz

from repo_finder.domain.entities import FormattedRow

THRESHOLD = 0.6
LOCATION = 0
DISTANCE = 100
MAX_PATTERN_LENGTH = 32
MIN_MATCH_CHAR_LENGTH = 1


@dataclass(frozen=True, slots=True)
class _Hit:
    score: float
    exact: bool
    similarity: float
    position: int
    row: FormattedRow


class SearchIndex:
    """Answers name queries against a fixed list of rows.

    The row list is captured once at construction and never mutated.
    """

    def __init__(self, rows: list[FormattedRow]) -> None:
        self._rows: tuple[FormattedRow, ...] = tuple(rows)
        self._names: tuple[str, ...] = tuple(row.repository.name.lower() for row in rows)

    def __len__(self) -> int:
        return len(self._rows)

    @property
    def rows(self) -> list[FormattedRow]:
        return list(self._rows)

    def search(self, query: str) -> list[FormattedRow]:
        """Return matching rows, best first; all rows for an empty query."""
        if not query:
            return list(self._rows)

        lowered = query.lower()
        pattern = lowered[:MAX_PATTERN_LENGTH]
        if len(pattern) < MIN_MATCH_CHAR_LENGTH:
            return []

        hits: list[_Hit] = []
        for position, (name, row) in enumerate(zip(self._names, self._rows)):
            score = _score(pattern, name)
            if score <= THRESHOLD:
                hits.append(
                    _Hit(
                        score=score,
                        exact=name == lowered,
                        similarity=fuzz.ratio(lowered, name),
                        position=position,
                        row=row,
                    )
                )

        hits.sort(key=lambda hit: (not hit.exact, hit.score, -hit.similarity, hit.position))
        return [hit.row for hit in hits]

    def best_match(self, query: str) -> FormattedRow | None:
        """Return the top row for *query*, preferring an exact name match."""
        lowered = query.strip().lower()
        for name, row in zip(self._names, self._rows):
            if name == lowered:
                return row
        results = self.search(query.strip())
        return results[0] if results else None


def _score(pattern: str, name: str) -> float:
    """Combine mismatch ratio with how far into the name the match starts."""
    alignment = fuzz.partial_ratio_alignment(pattern, name)
    if alignment is None or alignment.score == 0:
        return 1.0
    mismatch = 1.0 - alignment.score / 100.0
    proximity = abs(alignment.dest_start - LOCATION) / DISTANCE
    return mismatch + proximity
