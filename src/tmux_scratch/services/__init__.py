"""Service layer for external tool integrations."""

from tmux_scratch.services.config_loader import load_config
from tmux_scratch.services.tmux import TmuxService

__all__ = ["TmuxService", "load_config"]
