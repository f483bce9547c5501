"""Main entry point for the todo CLI."""
import logging
import sys

import click

from cli import cli
from config import load_settings
from logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = load_settings()
    setup_logging(console_level=settings.log_level, log_file=settings.log_file)
    try:
        cli.main(prog_name="todo")
    except Exception as exc:
        # click handles its own usage errors and exits; anything else is fatal
        logger.exception("Unhandled error")
        click.echo(str(exc))
        sys.exit(1)

if __name__ == "__main__":
    main()
