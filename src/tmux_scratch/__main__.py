"""Allow running tmux-scratch with ``python -m tmux_scratch``."""

from tmux_scratch.cli import app

if __name__ == "__main__":
    app(prog_name="tmux-scratch")
