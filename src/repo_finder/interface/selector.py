"""Interactive type-to-filter selector built on prompt_toolkit."""

from __future__ import annotations

from typing import Iterable

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError, Validator

from repo_finder.domain.entities import Repository
from repo_finder.domain.exceptions import SelectionCancelledError
from repo_finder.services.search_index import SearchIndex

_MENU_HEIGHT = 12


class RepoCompleter(Completer):
    """Feeds every keystroke through the search index."""

    def __init__(self, index: SearchIndex) -> None:
        self._index = index

    def get_completions(
        self, document: Document, complete_event: CompleteEvent
    ) -> Iterable[Completion]:
        query = document.text_before_cursor
        for row in self._index.search(query):
            yield Completion(
                row.repository.name,
                start_position=-len(query),
                display=row.display_text,
            )


class MatchValidator(Validator):
    """Refuses to accept input that matches no repository."""

    def __init__(self, index: SearchIndex) -> None:
        self._index = index

    def validate(self, document: Document) -> None:
        if self._index.best_match(document.text) is None:
            raise ValidationError(
                message="No repository matches this search",
                cursor_position=len(document.text),
            )


async def select_repository(
    index: SearchIndex,
    title: str,
    session: PromptSession[str] | None = None,
) -> Repository:
    """Block on the prompt until the user confirms one repository."""
    session = session or PromptSession()

    def _open_menu() -> None:
        session.default_buffer.start_completion(select_first=False)

    try:
        answer = await session.prompt_async(
            title,
            completer=RepoCompleter(index),
            complete_while_typing=True,
            validator=MatchValidator(index),
            validate_while_typing=False,
            reserve_space_for_menu=_MENU_HEIGHT,
            pre_run=_open_menu,
        )
    except (KeyboardInterrupt, EOFError) as exc:
        raise SelectionCancelledError("Selection cancelled.") from exc

    row = index.best_match(answer)
    if row is None:
        raise SelectionCancelledError("No repository selected.")
    return row.repository
