import typer
from rich.markup import escape

from indexer_cli.command_helpers import console, err_console
from indexer_cli.config import save_config, validate_api_url
from indexer_cli.errors import ConfigError


def connect(
    url: str = typer.Argument(..., help="Indexer management API URL"),
) -> None:
    """Connect to an indexer management API."""
    try:
        validate_api_url(url)
        path = save_config({"api": url})
    except (ConfigError, OSError) as e:
        err_console.print(f"[red]error: {escape(str(e))}[/red]", soft_wrap=True)
        raise typer.Exit(1)
    console.print(f"Connected to {escape(url)} (saved to {escape(str(path))})", highlight=False, soft_wrap=True)
