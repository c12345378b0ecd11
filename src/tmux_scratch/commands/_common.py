"""Helpers shared by the session commands."""

from collections.abc import Callable

import click
import typer

from tmux_scratch.console import print_error
from tmux_scratch.exceptions import ConfigError, TmuxScratchError
from tmux_scratch.logging_config import get_logger
from tmux_scratch.models.config import get_config
from tmux_scratch.services.tmux import TmuxService

logger = get_logger("tmux_scratch.commands")

SESSION_HELP = "Name of the scratch session (defaults to 'scratch' or the configured name)"
CWD_HELP = (
    "Whether to change the working directory to the current pane's directory on attaching "
    "(true/false, yes/no, on/off, 1/0)"
)


def build_service() -> TmuxService:
    """Create a TmuxService from the active configuration."""
    config = get_config()
    return TmuxService(
        tmux_path=config.tmux_path,
        popup_width=config.popup_width,
        popup_height=config.popup_height,
    )


def resolve_session(session: str | None) -> str:
    """Return the session name to act on, falling back to the configured default."""
    name = get_config().session if session is None else session
    if not name.strip():
        raise ConfigError("Session name must not be empty")
    return name


def run_action(description: str, action: Callable[[], None]) -> None:
    """Run a session action, turning failures into a diagnostic and exit code 1."""
    logger.debug(f"Running action: {description}")
    try:
        action()
    except TmuxScratchError as e:
        logger.error(f"{description} failed: {e}")
        print_error(str(e))
        raise typer.Exit(1) from e


def parse_cwd(value: str) -> bool:
    """Convert the --cwd value, accepting the usual boolean spellings."""
    try:
        return click.BOOL.convert(value, None, None)
    except click.BadParameter as e:
        raise typer.BadParameter(e.message, param_hint="'--cwd'") from e
