from __future__ import annotations
import logging
import sys
from repo_finder.infrastructure.config import get_settings
from repo_finder.interface.cli import cli

def main() -> None:
    """Configure logging and run the ``repos`` command."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        stream=sys.stderr,
    )
    cli(prog_name="repos")


if __name__ == "__main__":
    main()
