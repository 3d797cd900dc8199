import typer

from .cancel import CancelActionCommand, cancel_action

app = typer.Typer()

app.command(
    name="cancel",
    cls=CancelActionCommand,
    add_help_option=False,
    context_settings={"ignore_unknown_options": True},
)(cancel_action)
