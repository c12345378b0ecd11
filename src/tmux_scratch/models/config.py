"""Runtime configuration for tmux-scratch."""

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_SESSION = "scratch"


@dataclass
class Config:
    """Runtime configuration for tmux-scratch operations."""

    # Tmux settings
    tmux_path: str = "tmux"
    session: str = DEFAULT_SESSION

    # Popup geometry, passed verbatim to `tmux popup -w/-h`
    popup_width: str = "95%"
    popup_height: str = "95%"

    # Output settings
    verbose: bool = False

    # Paths
    log_dir: Path = field(default_factory=lambda: Path.home() / ".tmux-scratch" / "logs")


# Global config instance (can be overridden via CLI)
_config: Config | None = None


def get_config() -> Config:
    """Get the current configuration, creating a default if none exists."""
    global _config  # noqa: PLW0603
    if _config is None:
        _config = Config()
    return _config


def set_config(config: Config) -> None:
    """Set the global configuration."""
    global _config  # noqa: PLW0603
    _config = config
