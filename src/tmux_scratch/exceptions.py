"""Custom exceptions for tmux-scratch."""

from collections.abc import Sequence


class TmuxScratchError(Exception):
    """Base exception for all tmux-scratch errors."""


class ConfigError(TmuxScratchError):
    """Raised when the effective configuration is unusable."""


class TmuxError(TmuxScratchError):
    """Raised when a tmux operation fails."""


class TmuxSpawnError(TmuxError):
    """Raised when the tmux binary cannot be launched."""

    def __init__(self, command: Sequence[str], reason: str) -> None:
        self.command = list(command)
        super().__init__(f"Failed to run '{' '.join(self.command)}': {reason}")


class TmuxQueryError(TmuxError):
    """Raised when a tmux status query does not succeed."""


class TmuxQueryDecodeError(TmuxQueryError):
    """Raised when a tmux status query returns output that is not valid text."""
