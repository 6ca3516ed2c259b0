"""Command-line interface: ``repos [USERNAME] [--update] [--updateUser] [--clearCache]``."""

from __future__ import annotations

import asyncio
import logging
import click
from rich.console import Console
from rich.markup import escape

from repo_finder.domain.entities import Repository
from repo_finder.domain.exceptions import RepoFinderError
from repo_finder.infrastructure.config import get_settings
from repo_finder.interface.dependencies import Services, build_cache, open_services
from repo_finder.interface.error_handlers import EXIT_FAILURE, report_error
from repo_finder.interface.selector import select_repository
from repo_finder.services.row_formatter import format_rows
from repo_finder.services.search_index import SearchIndex

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

EXAMPLES = """\b
Examples:
  $ repos                 Get local repositories of current user
  $ repos banminkyoz      Get local repositories of 'banminkyoz'
  $ repos -u              Update repositories of current user to latest
  $ repos -u banminkyoz   Update repositories of 'banminkyoz' to latest
  $ repos -uu             Update the cached current user
  $ repos -cc             Clear all local cache
"""


def terminal_width() -> int:
    return console.width


async def run_session(
    services: Services,
    username: str | None,
    update: str | None,
    update_user: bool,
) -> Repository | None:
    """Resolve → load → format → prompt → launch.  Returns the opened repository."""
    target = username or update
    who = f"{target}'s" if target else "your"
    with console.status(f"Getting {who} github repos information...", spinner_style="blue"):
        name = await services.resolver.resolve(
            explicit=username, update_value=update, refresh_user=update_user
        )
        listing = await services.list_repos.execute(name, force_update=update is not None)

    if not listing.repositories:
        console.print(f"No repositories found for '{escape(listing.username)}'")
        return None

    index = SearchIndex(format_rows(listing.repositories, terminal_width()))
    console.print()
    repo = await select_repository(index, f"Type to search repos ({listing.source.value}): ")
    services.launcher.open(repo.url)
    return repo


async def _main(username: str | None, update: str | None, update_user: bool) -> None:
    async with open_services(get_settings(), console) as services:
        await run_session(services, username, update, update_user)


@click.command(
    epilog=EXAMPLES,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.argument("username", required=False)
@click.option(
    "--update",
    "-u",
    "update",
    type=str,
    is_flag=False,
    flag_value="",
    default=None,
    metavar="[USERNAME]",
    help="Update repositories data to latest.",
)
@click.option(
    "--updateUser",
    "-uu",
    "update_user",
    is_flag=True,
    help="Update the cached current user.",
)
@click.option(
    "--clearCache",
    "-cc",
    "clear_cache",
    is_flag=True,
    help="Clear local cache.",
)
def cli(
    username: str | None,
    update: str | None,
    update_user: bool,
    clear_cache: bool,
) -> None:
    """Fuzzy-search GitHub repositories and open one in the browser."""
    if clear_cache:
        try:
            build_cache(get_settings()).clear()
        except RepoFinderError as exc:
            raise SystemExit(report_error(err_console, exc))
        console.print("Cleared cache !")
        return

    if update:
        update = update.removeprefix("=")

    console.clear()
    try:
        asyncio.run(_main(username, update, update_user))
    except RepoFinderError as exc:
        raise SystemExit(report_error(err_console, exc))
    except Exception:
        logger.exception("Unhandled exception")
        err_console.print("[red]An unexpected error occurred.[/red]")
        raise SystemExit(EXIT_FAILURE)
