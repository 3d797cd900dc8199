"""``graph indexer actions cancel``: cancel queued actions by id."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Union

import click
import typer
from rich.markup import escape
from typer.core import TyperCommand

from indexer_cli.actions import cancel_actions
from indexer_cli.chains import resolve_chain_alias
from indexer_cli.client import create_indexer_management_client
from indexer_cli.command_helpers import OUTPUT_FORMATS, Spinner, console, err_console, print_object_or_array
from indexer_cli.config import load_validated_config

logger = logging.getLogger(__name__)

HELP = """
graph indexer actions cancel [options] [<actionID1> ...]

Options:

  -h, --help                    Show usage information
  -o, --output table|json|yaml  Choose the output format: table (default), JSON, or YAML
"""

ACTION_COLUMNS = (
    "id",
    "protocolNetwork",
    "type",
    "deploymentID",
    "allocationID",
    "amount",
    "poi",
    "force",
    "priority",
    "status",
    "source",
    "reason",
)


@dataclass(frozen=True)
class ValidatedInput:
    output_format: str
    action_ids: List[int]


@dataclass(frozen=True)
class InvalidInput:
    message: str


@dataclass(frozen=True)
class CancelOutcome:
    actions: List[Dict[str, Any]]


@dataclass(frozen=True)
class ExecutionFailure:
    message: str


class CancelActionCommand(TyperCommand):
    """Keeps argument errors inside the command's own help and exit code handling."""

    def parse_args(self, ctx: click.Context, args: List[str]) -> List[str]:
        if "-h" in args or "--help" in args:
            Spinner("Processing inputs").stop_and_persist("💁", HELP)
            ctx.exit(0)
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            Spinner("Processing inputs").fail(e.format_message())
            console.print(HELP, markup=False, highlight=False, soft_wrap=True)
            ctx.exit(1)


def validate_inputs(output_format: str, action_ids: Optional[Sequence[str]]) -> Union[ValidatedInput, InvalidInput]:
    if output_format not in OUTPUT_FORMATS:
        return InvalidInput(f"Invalid output format \"{output_format}\", must be one of {list(OUTPUT_FORMATS)}")

    if not action_ids:
        return InvalidInput("Missing required argument: 'actionID'")

    numeric_ids = []
    for token in action_ids:
        try:
            numeric_ids.append(int(token))
        except ValueError:
            return InvalidInput(f"Invalid action ID \"{token}\", must be an integer")

    return ValidatedInput(output_format=output_format, action_ids=numeric_ids)


def with_chain_aliases(actions: Sequence[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Copy the records, swapping CAIP-2 ids in protocolNetwork for network aliases."""
    return [{**action, "protocolNetwork": resolve_chain_alias(action.get("protocolNetwork"))} for action in actions]


def execute_cancel(action_ids: List[int]) -> Union[CancelOutcome, ExecutionFailure]:
    # Once cancel_actions returns the queue has changed, later failures still count as a failed run.
    try:
        config = load_validated_config()
        with create_indexer_management_client(config.api, timeout=config.timeout) as client:
            canceled = cancel_actions(client, action_ids)
        return CancelOutcome(actions=with_chain_aliases(canceled))
    except Exception as e:
        logger.debug("Cancelling actions failed", exc_info=True)
        return ExecutionFailure(str(e))


def cancel_action(
    action_ids: Optional[List[str]] = typer.Argument(None, metavar="[<actionID1> ...]", show_default=False),
    output: str = typer.Option("table", "--output", "-o", help="Choose the output format: table, json or yaml"),
) -> None:
    """Cancel an item in the queue."""
    input_spinner = Spinner("Processing inputs")

    validated = validate_inputs(output, action_ids)
    if isinstance(validated, InvalidInput):
        input_spinner.fail(validated.message)
        console.print(HELP, markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(1)
    input_spinner.succeed("Processed input parameters")

    action_spinner = Spinner(f"Cancelling {len(validated.action_ids)} actions")
    outcome = execute_cancel(validated.action_ids)
    if isinstance(outcome, ExecutionFailure):
        action_spinner.fail(outcome.message)
        raise typer.Exit(1)
    action_spinner.succeed("Actions canceled")

    try:
        print_object_or_array(console, validated.output_format, outcome.actions, ACTION_COLUMNS)
    except Exception as e:
        err_console.print(f"[red]✖[/red] {escape(str(e))}", highlight=False, soft_wrap=True)
        raise typer.Exit(1)
