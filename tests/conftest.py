"""Shared test fixtures for tmux-scratch tests."""

import logging
import subprocess
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from tmux_scratch import logging_config
from tmux_scratch.models import config as config_module
from tmux_scratch.services import tmux as tmux_module


def _clear_logging() -> None:
    """Drop the handlers installed by setup_logging so each test starts clean."""
    root_logger = logging.getLogger("tmux_scratch")
    for handler in list(root_logger.handlers):
        handler.close()
        root_logger.removeHandler(handler)
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point HOME at a temp dir and reset process-wide state around each test."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("TMUX_SCRATCH_TMUX_PATH", raising=False)
    monkeypatch.delenv("TMUX_SCRATCH_SESSION", raising=False)
    monkeypatch.setattr(config_module, "_config", None)
    monkeypatch.setattr(logging_config, "_initialized", False)
    monkeypatch.setattr(logging_config, "_log_file", None)
    _clear_logging()
    yield home
    _clear_logging()


class FakeTmux:
    """Stand-in for the tmux binary that records every invocation.

    Spawned commands take effect immediately so tests can observe the
    resulting state, as tmux would once it has caught up.
    """

    def __init__(self) -> None:
        self.sessions: set[str] = set()
        self.current_session = "main"
        self.pane_path = "/home/user/project"
        self.calls: list[list[str]] = []
        self.spawned: list[list[str]] = []
        self.popup_kwargs: dict[str, object] = {}
        self.display_stdout: bytes | None = None
        self.display_returncode = 0
        self.missing_binary = False
        self.failing_spawns: set[str] = set()
        self._previous_session = "main"

    def subcommands(self) -> list[str]:
        return [cmd[1] for cmd in self.calls]

    def spawned_subcommands(self) -> list[str]:
        return [cmd[1] for cmd in self.spawned]

    def run(self, cmd: list[str], **_kwargs: object) -> subprocess.CompletedProcess[bytes]:
        if self.missing_binary:
            raise FileNotFoundError(2, "No such file or directory", cmd[0])
        self.calls.append(list(cmd))
        subcommand = cmd[1]
        if subcommand == "has-session":
            code = 0 if cmd[3] in self.sessions else 1
            return subprocess.CompletedProcess(cmd, code, b"", b"")
        if subcommand == "display-message":
            if self.display_returncode != 0:
                return subprocess.CompletedProcess(
                    cmd, self.display_returncode, b"", b"no current client\n"
                )
            if self.display_stdout is not None:
                return subprocess.CompletedProcess(cmd, 0, self.display_stdout, b"")
            values = {
                "#{session_name}": self.current_session,
                "#{pane_current_path}": self.pane_path,
            }
            return subprocess.CompletedProcess(cmd, 0, f"{values[cmd[4]]}\n".encode(), b"")
        raise AssertionError(f"unexpected waited command: {cmd}")

    def popen(self, cmd: list[str], **kwargs: object) -> MagicMock:
        if self.missing_binary:
            raise FileNotFoundError(2, "No such file or directory", cmd[0])
        if cmd[1] in self.failing_spawns:
            raise PermissionError(13, "Permission denied", cmd[0])
        self.calls.append(list(cmd))
        self.spawned.append(list(cmd))
        subcommand = cmd[1]
        if subcommand == "new-session":
            self.sessions.add(cmd[4])
        elif subcommand == "popup":
            self.popup_kwargs = kwargs
            name = cmd[-1].split(" -t ")[1].split()[0]
            self._previous_session = self.current_session
            self.current_session = name
        elif subcommand == "detach":
            if self.current_session == cmd[3]:
                self.current_session = self._previous_session
        return MagicMock()


@pytest.fixture
def fake_tmux(monkeypatch: pytest.MonkeyPatch) -> FakeTmux:
    """Replace subprocess calls in the tmux service with a FakeTmux."""
    fake = FakeTmux()
    monkeypatch.setattr(tmux_module.subprocess, "run", fake.run)
    monkeypatch.setattr(tmux_module.subprocess, "Popen", fake.popen)
    return fake
