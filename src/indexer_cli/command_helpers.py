"""Output helpers shared by the CLI commands."""

import json
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

import yaml
from rich.console import Console
from rich.markup import escape
from rich.status import Status
from rich.table import Table

OUTPUT_FORMATS = ("json", "yaml", "table")

console = Console()
err_console = Console(stderr=True)

Record = Mapping[str, Any]


def pick_fields(record: Record, keys: Sequence[str]) -> Dict[str, Any]:
    return {key: record.get(key) for key in keys}


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    return escape(str(value))


def _render_table(console: Console, data: Union[Record, List[Record]], keys: Sequence[str]) -> None:
    if isinstance(data, list):
        table = Table()
        for key in keys:
            table.add_column(key, style="cyan" if key == "id" else None, overflow="fold")
        for record in data:
            table.add_row(*(_cell(record[key]) for key in keys))
    else:
        table = Table(show_header=False)
        table.add_column("field", style="cyan")
        table.add_column("value", overflow="fold")
        for key in keys:
            table.add_row(key, _cell(data[key]))
    console.print(table)


def print_object_or_array(
    console: Console,
    output_format: str,
    data: Union[Record, Sequence[Record]],
    keys: Sequence[str],
) -> None:
    """Print a record or a list of records restricted to ``keys``, in that order."""
    if isinstance(data, Mapping):
        projected: Union[Dict[str, Any], List[Dict[str, Any]]] = pick_fields(data, keys)
    else:
        projected = [pick_fields(record, keys) for record in data]

    if output_format == "json":
        console.out(json.dumps(projected, indent=2), highlight=False)
    elif output_format == "yaml":
        text = yaml.safe_dump(projected, sort_keys=False, default_flow_style=False)
        console.out(text.rstrip("\n"), highlight=False)
    elif output_format == "table":
        if isinstance(projected, list) and not projected:
            console.print("[yellow]No items found[/yellow]")
            return
        _render_table(console, projected, keys)
    else:
        raise ValueError(f"Unsupported output format {output_format!r}")


class Spinner:
    """A status line that ends in exactly one success, failure or persisted message."""

    def __init__(self, text: str, console: Optional[Console] = None):
        self.console = console or err_console
        self._status: Status = self.console.status(text)
        self._status.start()
        self._done = False

    def _stop(self) -> bool:
        if self._done:
            return False
        self._done = True
        self._status.stop()
        return True

    def succeed(self, text: str) -> None:
        if self._stop():
            self.console.print(f"[green]✔[/green] {escape(text)}", highlight=False, soft_wrap=True)

    def fail(self, text: str) -> None:
        if self._stop():
            self.console.print(f"[red]✖[/red] {escape(text)}", highlight=False, soft_wrap=True)

    def stop_and_persist(self, symbol: str, text: str) -> None:
        if self._stop():
            self.console.print(f"{symbol} {text}", markup=False, highlight=False, soft_wrap=True)
