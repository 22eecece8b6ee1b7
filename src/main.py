"""Main entry point for the terminal tasklist."""
import logging

import click

import theme
from cli import CLI
from config import Settings
from logging_setup import setup_logging
from storage import Storage, StorageError
from store import TaskStore

logger = logging.getLogger(__name__)


@click.command()
@click.pass_context
def main(ctx: click.Context):
    """Interactive task list: add, print, edit, delete, end."""
    # click strips escapes off a non-TTY stdout unless ctx.color says otherwise
    ctx.color = theme._ENABLE
    settings = Settings.from_env()
    setup_logging(console_level=settings.log_level, log_file=settings.log_file)
    store = TaskStore(Storage(settings.tasks_file))
    try:
        store.load()
        CLI(store).run()
    except StorageError as e:
        logger.error("%s", e)
        raise click.ClickException(str(e)) from e

if __name__ == "__main__":
    main()
