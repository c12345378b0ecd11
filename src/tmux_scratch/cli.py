"""tmux-scratch CLI - toggle a scratch tmux session in a popup window."""

from typing import Annotated

import typer

from tmux_scratch import __version__
from tmux_scratch.commands.attach import attach
from tmux_scratch.commands.detach import detach
from tmux_scratch.commands.toggle import toggle
from tmux_scratch.console import console
from tmux_scratch.logging_config import get_logger, setup_logging
from tmux_scratch.models.config import set_config
from tmux_scratch.services.config_loader import load_config

# Create the Typer app
app = typer.Typer(
    name="tmux-scratch",
    help="Toggle a scratch tmux session in a popup window.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands
app.command(name="toggle")(toggle)
app.command(name="attach")(attach)
app.command(name="detach")(detach)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", "-V", help="Show version and exit", is_eager=True),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to the log file"),
    ] = False,
) -> None:
    """tmux-scratch - a scratch terminal that is always one keypress away.

    Bind it in tmux, e.g. [cyan]bind-key -n M-g run-shell "tmux-scratch toggle"[/cyan].
    """
    if version:
        console.print(f"tmux-scratch version {__version__}")
        raise typer.Exit()

    config = load_config()
    config.verbose = verbose
    set_config(config)

    # Initialize logging before any tmux call
    setup_logging(config)
    logger = get_logger("tmux_scratch.cli")

    if ctx.invoked_subcommand:
        logger.info(f"Command invoked: {ctx.invoked_subcommand}")

    # Show help if no command provided
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


if __name__ == "__main__":
    app()
