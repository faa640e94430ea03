"""Centralized logging configuration for issuestatus.

Console output is written in GitHub Actions workflow-command form so debug
lines only show up when step debugging is enabled. A rotating file log can be
added for local runs.
"""

from __future__ import annotations

import logging
import os
import re
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from issuestatus.actions.commands import escape_data

# Default configuration
DEFAULT_LOG_FILE = "issuestatus.log"
DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_BACKUP_COUNT = 5
DEFAULT_LOG_LEVEL = "INFO"

# Log format
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ActionsConsoleHandler(logging.StreamHandler):
    """Stream handler that prefixes records with Actions workflow commands.

    DEBUG records become ``::debug::`` lines and WARNING records become
    ``::warning::`` lines. ERROR records are left plain; the failure message is
    reported once through ``actions.set_failed``.
    """

    PREFIXES = {
        logging.DEBUG: "::debug::",
        logging.WARNING: "::warning::",
    }

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        prefix = self.PREFIXES.get(record.levelno)
        if prefix is None:
            return message
        # Workflow commands are single-line
        return f"{prefix}{escape_data(message)}"


def _default_level() -> str:
    if os.environ.get("RUNNER_DEBUG") == "1":
        return "DEBUG"
    return os.environ.get("ISSUESTATUS_LOG_LEVEL", DEFAULT_LOG_LEVEL)


def setup_logging(
    log_dir: str | Path | None = None,
    log_file: str = DEFAULT_LOG_FILE,
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
    level: str | None = None,
    console: bool = True,
) -> logging.Logger:
    """Set up logging for a single run.

    Args:
        log_dir: Directory for an optional rotating log file. No file is written
                 when neither this nor ISSUESTATUS_LOG_DIR is set.
        log_file: Log file name. Defaults to 'issuestatus.log'.
        max_bytes: Maximum size per log file before rotation. Defaults to 10MB.
        backup_count: Number of backup files to keep. Defaults to 5.
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to INFO,
               DEBUG when RUNNER_DEBUG=1, or ISSUESTATUS_LOG_LEVEL if set.
        console: Whether to log to stdout. Defaults to True.

    Returns:
        The root issuestatus logger.
    """
    if log_dir is None:
        log_dir = os.environ.get("ISSUESTATUS_LOG_DIR")

    if level is None:
        level = _default_level()
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("issuestatus")
    logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    log_path: Path | None = None
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / log_file
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    if console:
        # Actions captures stdout; workflow commands are only parsed there
        console_handler = ActionsConsoleHandler(sys.stdout)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        logger.addHandler(console_handler)

    logger.debug("issuestatus logging initialized (level=%s, file=%s)", level, log_path)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a component.

    Args:
        name: Component name (e.g., 'projects', 'updater').
              Will be prefixed with 'issuestatus.'.

    Returns:
        Logger instance for the component.
    """
    if not name.startswith("issuestatus."):
        name = f"issuestatus.{name}"
    return logging.getLogger(name)


def truncate_output(output: str, max_length: int = 2000) -> str:
    """Truncate long output for logging.

    Args:
        output: The output string to truncate.
        max_length: Maximum length before truncation.

    Returns:
        Truncated string with indicator if truncated.
    """
    if len(output) <= max_length:
        return output
    return output[:max_length] + f"\n... [truncated, {len(output) - max_length} more chars]"


def sanitize_for_log(text: str) -> str:
    """Remove sensitive data from log output.

    Args:
        text: Text that may contain sensitive data.

    Returns:
        Sanitized text safe for logging.
    """
    patterns = [
        (r"ghp_[a-zA-Z0-9]{36}", "[GITHUB_TOKEN]"),  # GitHub PAT
        (r"gho_[a-zA-Z0-9]{36}", "[GITHUB_TOKEN]"),  # GitHub OAuth
        (r"ghs_[a-zA-Z0-9]{36}", "[GITHUB_TOKEN]"),  # Actions installation token
        (r"github_pat_[a-zA-Z0-9_]{82}", "[GITHUB_TOKEN]"),  # Fine-grained PAT
        (r"Bearer [a-zA-Z0-9._-]+", "Bearer [REDACTED]"),  # Bearer tokens
        (r"token=[a-zA-Z0-9._-]+", "token=[REDACTED]"),  # Query param tokens
    ]

    result = text
    for pat, replacement in patterns:
        result = re.sub(pat, replacement, result)

    return result
