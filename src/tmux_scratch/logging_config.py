"""Logging configuration for tmux-scratch."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from tmux_scratch.models.config import Config

# Module-level state
_log_file: Path | None = None
_initialized: bool = False

# Log format
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "tmux-scratch.log"


def get_log_file() -> Path | None:
    """Return the active log file, or None before logging is set up."""
    return _log_file


def setup_logging(config: Config) -> None:
    """Initialize the logging system.

    Everything goes to a rotating file; nothing is written to the terminal so
    that successful runs stay silent.

    Args:
        config: Config providing the log directory and verbosity. If
                verbose=True, logs DEBUG; otherwise INFO.
    """
    global _initialized, _log_file  # noqa: PLW0603
    if _initialized:
        return

    log_level = logging.DEBUG if config.verbose else logging.INFO

    root_logger = logging.getLogger("tmux_scratch")
    root_logger.setLevel(log_level)
    root_logger.propagate = False

    # Clear existing handlers to avoid duplicates
    root_logger.handlers.clear()

    try:
        config.log_dir.mkdir(parents=True, exist_ok=True)
        log_file = config.log_dir / LOG_FILE_NAME
        handler: logging.Handler = RotatingFileHandler(
            log_file,
            maxBytes=1024 * 1024,  # 1 MB per file
            backupCount=3,
            encoding="utf-8",
        )
    except OSError:
        # Logging must never stop the toggle itself from working
        handler = logging.NullHandler()
        log_file = None

    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
    root_logger.addHandler(handler)

    _log_file = log_file
    _initialized = True

    root_logger.debug(f"Logging to {log_file} (python {sys.version.split()[0]})")


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a specific module.

    Args:
        name: Module name (e.g., "tmux_scratch.services.tmux")

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def log_subprocess_result(
    logger: logging.Logger,
    cmd: list[str] | str,
    exit_code: int,
    stdout: str | None = None,
    stderr: str | None = None,
    success: bool = True,
) -> None:
    """Log the result of a subprocess call.

    Args:
        logger: The logger to use
        cmd: Command that was executed
        exit_code: Process exit code
        stdout: Captured stdout (if any)
        stderr: Captured stderr (if any)
        success: Whether the operation succeeded
    """
    cmd_str = cmd if isinstance(cmd, str) else " ".join(cmd)
    level = logging.DEBUG if success else logging.WARNING

    logger.log(level, f"Subprocess: {cmd_str}")
    logger.log(level, f"  Exit code: {exit_code}")

    if stdout and stdout.strip():
        for line in stdout.strip().split("\n")[:20]:
            logger.log(level, f"  stdout: {line}")

    if stderr and stderr.strip():
        for line in stderr.strip().split("\n")[:20]:
            logger.log(level, f"  stderr: {line}")
