"""Data models for tmux-scratch."""

from tmux_scratch.models.config import Config

__all__ = ["Config"]
