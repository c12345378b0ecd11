"""tmux-scratch - toggle a scratch tmux session in a popup window."""

__version__ = "0.1.0"
