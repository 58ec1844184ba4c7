"""Logging infrastructure for the application.

Provides centralized logger configuration with file and console handlers.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from devcheck.config.config_loader import PROJECT_ROOT
from devcheck.config.service import get_config_service


def _resolve_log_file() -> Path:
    """Return the log file path from general.logs_dir, or PROJECT_ROOT/logs."""
    # Be resilient: a broken config file must not prevent logging.
    try:
        check_config = get_config_service().get_check_config()
        logs_dir_value = check_config.get("general", {}).get("logs_dir")
    except Exception:
        logs_dir_value = None
    if not logs_dir_value:
        return PROJECT_ROOT / "logs" / "devcheck.log"
    logs_path = Path(logs_dir_value)
    # Check if path points to a file (has .log extension) or directory
    if logs_path.suffix == ".log":
        return logs_path
    return logs_path / "devcheck.log"


def _open_file_handler(log_file: Path) -> Optional[logging.FileHandler]:
    """Create the log directory and file handler; None when the location is not writable."""
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(log_file, encoding="utf-8")
    except OSError:
        return None


def setup_logger(name: str) -> logging.Logger:
    """
    Set up and return a logger with file and console handlers.

    Logs are written to the configured logs directory (general.logs_dir in
    check_config.yaml) or PROJECT_ROOT/logs as a fallback. When neither can be
    written, the logger keeps only its console handler. The console handler
    only shows warnings and errors, so it never competes with the check report
    printed on stdout; the file handler captures INFO and above.

    Args:
        name: Name of the logger (typically __name__ from the calling module).

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    if not logger.handlers:
        log_file = _resolve_log_file()
        file_handler = _open_file_handler(log_file)
        fallback = PROJECT_ROOT / "logs" / "devcheck.log"
        if file_handler is None and log_file != fallback:
            file_handler = _open_file_handler(fallback)
        if file_handler is not None:
            file_handler.setFormatter(
                logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
            )
            logger.addHandler(file_handler)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        logger.addHandler(console_handler)
    return logger
