"""CLI commands for tmux-scratch."""

from tmux_scratch.commands.attach import attach
from tmux_scratch.commands.detach import detach
from tmux_scratch.commands.toggle import toggle

__all__ = ["attach", "detach", "toggle"]
