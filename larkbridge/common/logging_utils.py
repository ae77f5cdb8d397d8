"""Logging utilities for consistent logging across modules."""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _log_dir(log_dir: Optional[str] = None) -> Optional[Path]:
    log_dir = log_dir or os.getenv("LARKBRIDGE_LOG_DIR")
    if not log_dir:
        return None
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    return log_path


def setup_logging(level: str = "INFO", log_dir: Optional[str] = None) -> None:
    """Setup logging configuration.

    Logs always go to the console. When a log directory is given (or
    ``LARKBRIDGE_LOG_DIR`` is set) they are also written to ``larkbridge.log``.
    """
    handlers = [logging.StreamHandler()]
    log_path = _log_dir(log_dir)
    if log_path is not None:
        handlers.append(logging.FileHandler(log_path / "larkbridge.log"))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def log_server_message(message: str) -> None:
    """Log server-related messages."""
    logging.info(f"[SERVER] {message}")


def log_error(error_message: str, error_data: str = "", log_dir: Optional[str] = None) -> None:
    """Log an error, and write it to a timestamped file when a log directory is configured."""
    logging.error(error_message)
    try:
        log_path = _log_dir(log_dir)
        if log_path is None:
            return

        timestamp = datetime.now().strftime("%Y%m%dT%H%M%S%f")
        error_file = log_path / f"error-{timestamp}.log"

        with open(error_file, "w", encoding="utf-8") as f:
            f.write(f"Error occurred at: {datetime.now().isoformat()}\n")
            f.write(f"Error message: {error_message}\n")
            if error_data:
                f.write(f"Error data:\n{error_data}\n")

        logging.error(f"Error logged to: {error_file}")

    except OSError as e:
        logging.error(f"Failed to log error: {e}")
