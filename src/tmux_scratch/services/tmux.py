"""Tmux scratch session management service."""

import shlex
import subprocess
from dataclasses import dataclass

from tmux_scratch.exceptions import TmuxQueryDecodeError, TmuxQueryError, TmuxSpawnError
from tmux_scratch.logging_config import get_logger, log_subprocess_result

logger = get_logger("tmux_scratch.services.tmux")

# tmux formats resolved through `display-message`
SESSION_NAME_FORMAT = "#{session_name}"
PANE_PATH_FORMAT = "#{pane_current_path}"


@dataclass
class TmuxService:
    """Service for toggling a scratch tmux session in a popup.

    Nothing about tmux state is cached: every decision is made from a fresh
    query, so the service is safe to reuse across calls.
    """

    tmux_path: str = "tmux"
    popup_width: str = "95%"
    popup_height: str = "95%"

    def _command(self, *args: str) -> list[str]:
        return [self.tmux_path, *args]

    def _run(self, cmd: list[str]) -> subprocess.CompletedProcess[bytes]:
        """Run a tmux command to completion, capturing its output as bytes.

        Raises:
            TmuxSpawnError: If tmux cannot be launched
        """
        try:
            return subprocess.run(cmd, capture_output=True, check=False)
        except OSError as e:
            logger.exception(f"Failed to run {cmd[0]}")
            raise TmuxSpawnError(cmd, str(e)) from e

    def _spawn(self, cmd: list[str], *, quiet: bool = False) -> None:
        """Launch a tmux command without waiting for it to finish.

        Args:
            cmd: Full argument vector
            quiet: Redirect stdin, stdout and stderr to /dev/null

        Raises:
            TmuxSpawnError: If tmux cannot be launched
        """
        streams = (
            {
                "stdin": subprocess.DEVNULL,
                "stdout": subprocess.DEVNULL,
                "stderr": subprocess.DEVNULL,
            }
            if quiet
            else {}
        )
        logger.debug(f"Spawning: {' '.join(cmd)}")
        try:
            subprocess.Popen(cmd, **streams)  # noqa: S603
        except OSError as e:
            logger.exception(f"Failed to spawn {cmd[0]}")
            raise TmuxSpawnError(cmd, str(e)) from e

    def has_session(self, name: str) -> bool:
        """Check if a tmux session exists.

        A missing session is a normal ``False`` result, not an error.

        Args:
            name: Session name

        Returns:
            True if the session exists
        """
        cmd = self._command("has-session", "-t", name)
        result = self._run(cmd)
        exists = result.returncode == 0
        logger.debug(f"has_session({name}): {exists}")
        return exists

    def create_session(self, name: str) -> None:
        """Request creation of a detached session; does not wait for tmux."""
        logger.info(f"Creating tmux session: {name}")
        self._spawn(self._command("new-session", "-d", "-s", name))

    def display_message(self, fmt: str) -> str:
        """Resolve a tmux format string for the current client.

        Args:
            fmt: Format such as ``#{session_name}``

        Returns:
            The raw text printed by tmux, including the trailing newline.

        Raises:
            TmuxSpawnError: If tmux cannot be launched
            TmuxQueryError: If tmux reports a failure
            TmuxQueryDecodeError: If the output is not valid UTF-8
        """
        cmd = self._command("display-message", "-p", "-F", fmt)
        result = self._run(cmd)
        stderr = result.stderr.decode("utf-8", errors="replace")
        if result.returncode != 0:
            log_subprocess_result(logger, cmd, result.returncode, stderr=stderr, success=False)
            raise TmuxQueryError(
                f"tmux could not resolve '{fmt}': {stderr.strip() or f'exit {result.returncode}'}"
            )

        try:
            output = result.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise TmuxQueryDecodeError(f"tmux returned non-UTF-8 output for '{fmt}'") from e

        log_subprocess_result(logger, cmd, result.returncode, output, stderr)
        return output

    def current_path(self) -> str:
        """Return the working directory of the active pane."""
        return self.display_message(PANE_PATH_FORMAT).strip()

    def is_attached(self, name: str) -> bool:
        """Check whether the invoking client is currently showing the session.

        Only the client this command runs from is consulted; the session being
        attached to some other client does not count.
        """
        current = self.display_message(SESSION_NAME_FORMAT).strip()
        logger.debug(f"is_attached({name}): current session is '{current}'")
        return current == name

    def attach_command(self, name: str, directory: str | None = None) -> str:
        """Build the shell command the popup runs to attach to the session."""
        command = f"{shlex.quote(self.tmux_path)} attach-session -t {shlex.quote(name)}"
        if directory is not None:
            command += f" -c {shlex.quote(directory)}"
        return command

    def attach_session(self, name: str, use_cwd: bool = True) -> None:
        """Open the session in a centered popup, creating it if needed.

        Does nothing if the invoking client is already showing the session.

        Args:
            name: Session name
            use_cwd: Start the attached client in the active pane's directory
        """
        if not self.has_session(name):
            self.create_session(name)

        if self.is_attached(name):
            logger.info(f"Session '{name}' is already attached, nothing to do")
            return

        directory = self.current_path() if use_cwd else None
        attach_command = self.attach_command(name, directory)

        logger.info(f"Opening popup for session '{name}'")
        self._spawn(
            self._command(
                "popup",
                "-d",
                PANE_PATH_FORMAT,
                "-xC",
                "-yC",
                f"-w{self.popup_width}",
                f"-h{self.popup_height}",
                "-E",
                attach_command,
            ),
            quiet=True,
        )

    def detach_session(self, name: str) -> None:
        """Request that clients of the session detach; does not wait for tmux."""
        logger.info(f"Detaching tmux session: {name}")
        self._spawn(self._command("detach", "-s", name))

    def toggle_session(self, name: str, use_cwd: bool = True) -> None:
        """Detach the session if the invoking client shows it, otherwise attach."""
        if self.is_attached(name):
            self.detach_session(name)
        else:
            self.attach_session(name, use_cwd)
