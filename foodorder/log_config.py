"""Logging configuration."""

from __future__ import annotations

import logging
from pathlib import Path

from foodorder.config import DEBUG_LOG_PATH


def setup_logging(path: str | Path = DEBUG_LOG_PATH, level: int = logging.INFO) -> None:
    """Send application logs to a file; the terminal is owned by the UI."""
    log_path = Path(path)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.FileHandler(log_path, encoding="utf-8"),
        ],
    )

    # Textual is chatty at INFO.
    logging.getLogger("textual").setLevel(logging.WARNING)
