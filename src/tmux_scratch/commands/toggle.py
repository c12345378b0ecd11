"""Toggle command - show or hide the scratch session popup."""

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


def toggle(
    session: Annotated[
        str | None,
        typer.Option("--session", "-s", help=SESSION_HELP),
    ] = None,
    cwd: Annotated[
        str,
        typer.Option("--cwd", "-c", metavar="BOOL", help=CWD_HELP),
    ] = "true",
) -> None:
    """Toggle the scratch session popup.

    Detaches the session if this client is showing it, otherwise opens it in
    a popup (creating the session first if it does not exist).
    """

    use_cwd = parse_cwd(cwd)

    def action() -> None:
        build_service().toggle_session(resolve_session(session), use_cwd)

    run_action("toggle", action)
