"""
Shared utilities for CLI parsing and logging configuration.
"""

from typing import Callable, Optional
import argparse
import logging
import time
from pathlib import Path


def parse_positive_int(text: str, *, label: str) -> int:
    """Parse a strictly positive integer."""
    raw = (text or "").strip()
    if not raw:
        raise ValueError(f"{label} cannot be empty")
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{label} must be an integer: {text!r}") from exc
    if value < 1:
        raise ValueError(f"{label} must be at least 1, got {value}")
    return value


def positive_int_type(label: str) -> Callable[[str], int]:
    def _parser(text: str) -> int:
        try:
            return parse_positive_int(text, label=label)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(str(exc))
    return _parser


def shorten_hash(value: str, length: Optional[int]) -> str:
    if length is None:
        return value
    return value[: max(0, int(length))]


def setup_logging(
    log_type: str,
    name: str,
    log_dir: Optional[str] = None,
    level: int = logging.INFO,
) -> logging.Logger:
    """Sets up the ``Yeth`` logger for a CLI run.

    Library modules log through ``logging.getLogger(__name__)`` and inherit these
    handlers; a file handler is only attached when ``log_dir`` is given.
    Handlers are attached on the first call only: a later call in the same process
    changes the level but adds no file handler, even with a different ``log_dir``.
    """
    logger = logging.getLogger("Yeth")
    logger.setLevel(level)

    # Prevent adding multiple handlers if the logger already exists
    if not logger.handlers:
        session_id = int(time.time())
        formatter = logging.Formatter(
            f'%(asctime)s - %(levelname)s - [Session: {session_id}]-[{log_type}: {name}] - %(message)s'
        )

        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

        if log_dir:
            log_dir_path = Path(log_dir)
            log_dir_path.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_dir_path / f"{log_type}_logs.log", mode='a')  # Append mode
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
