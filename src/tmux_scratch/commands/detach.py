"""Detach command - close the scratch session popup."""

from typing import Annotated

import typer

from tmux_scratch.commands._common import SESSION_HELP, build_service, resolve_session, run_action


def detach(
    session: Annotated[
        str | None,
        typer.Option("--session", "-s", help=SESSION_HELP),
    ] = None,
) -> None:
    """Detach all clients from the scratch session."""

    def action() -> None:
        build_service().detach_session(resolve_session(session))

    run_action("detach", action)
