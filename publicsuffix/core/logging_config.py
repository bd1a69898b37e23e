"""Logging configuration for publicsuffix."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .constants import (
    LOGS_DIR,
    DEBUG_LOG_FILE,
    AUDIT_LOG_FILE,
    DEBUG_LOG_MAX_BYTES,
    DEBUG_LOG_BACKUP_COUNT,
)

# Logger names
AUDIT_LOGGER_NAME = "audit"

# Format strings
DEBUG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
AUDIT_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def setup_logging(debug_mode: bool = False, log_dir: Path | None = None) -> None:
    """
    Configure application logging.

    Sets up two log targets:
    1. Debug log: Rotating file handler with DEBUG level
    2. Audit log: Append-only file recording list loads

    Args:
        debug_mode: If True, also output DEBUG to console
        log_dir: Directory for log files, defaults to the app logs dir
    """
    if log_dir is None:
        log_dir = LOGS_DIR
        debug_log_file = DEBUG_LOG_FILE
        audit_log_file = AUDIT_LOG_FILE
    else:
        debug_log_file = log_dir / DEBUG_LOG_FILE.name
        audit_log_file = log_dir / AUDIT_LOG_FILE.name

    log_dir.mkdir(parents=True, exist_ok=True)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Clear any existing handlers
    root_logger.handlers.clear()

    # Debug file handler (rotating)
    debug_handler = RotatingFileHandler(
        debug_log_file,
        maxBytes=DEBUG_LOG_MAX_BYTES,
        backupCount=DEBUG_LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    debug_handler.setLevel(logging.DEBUG)
    debug_handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
    root_logger.addHandler(debug_handler)

    # Console handler (only in debug mode)
    if debug_mode:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
        root_logger.addHandler(console_handler)

    # Configure audit logger (separate logger with its own handler)
    audit_logger = logging.getLogger(AUDIT_LOGGER_NAME)
    audit_logger.setLevel(logging.INFO)
    audit_logger.propagate = False  # Don't send to root logger
    audit_logger.handlers.clear()

    audit_handler = logging.FileHandler(
        audit_log_file,
        mode="a",
        encoding="utf-8",
    )
    audit_handler.setLevel(logging.INFO)
    audit_handler.setFormatter(logging.Formatter(AUDIT_FORMAT))
    audit_logger.addHandler(audit_handler)


def get_audit_logger() -> logging.Logger:
    """Return the audit logger instance."""
    return logging.getLogger(AUDIT_LOGGER_NAME)


def log_list_loaded(source: str, rule_count: int, private_count: int) -> None:
    """
    Log a rule list load to the audit log.

    Args:
        source: Where the rules came from (file path or "default")
        rule_count: Total number of rules loaded
        private_count: Number of rules from the private domains section
    """
    audit = get_audit_logger()
    audit.info(
        "LOAD | source=%s | rules=%d | private=%d",
        source,
        rule_count,
        private_count,
    )
