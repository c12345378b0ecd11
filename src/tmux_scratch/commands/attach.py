"""Attach command - open the scratch session in a popup."""

from typing import Annotated

import typer

from tmux_scratch.commands._common import (
    CWD_HELP,
    SESSION_HELP,
    build_service,
    parse_cwd,
    resolve_session,
    run_action,
)


def attach(
    session: Annotated[
        str | None,
        typer.Option("--session", "-s", help=SESSION_HELP),
    ] = None,
    cwd: Annotated[
        str,
        typer.Option("--cwd", "-c", metavar="BOOL", help=CWD_HELP),
    ] = "true",
) -> None:
    """Open the scratch session in a centered popup.

    The session is created if needed. Nothing happens when this client is
    already showing it.
    """

    use_cwd = parse_cwd(cwd)

    def action() -> None:
        build_service().attach_session(resolve_session(session), use_cwd)

    run_action("attach", action)
