"""graph indexer CLI - Main entry point."""

import logging

import click
import typer

from indexer_cli.commands import actions
from indexer_cli.commands.connect import connect
from indexer_cli.config import ENV_PREFIX, LOG_FORMAT

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

app = typer.Typer(
    help="Manage an indexer through its indexer management API",
    no_args_is_help=True,
)


@app.callback()
def configure(
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        envvar=f"{ENV_PREFIX}LOG_LEVEL",
        click_type=click.Choice(LOG_LEVELS, case_sensitive=False),
        help="Logging level",
    ),
) -> None:
    logging.basicConfig(level=log_level.upper(), format=LOG_FORMAT)


app.command(name="connect")(connect)
app.add_typer(actions.app, name="actions", help="Manage the indexer action queue")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
