"""Logging setup shared by the scanner, the worker thread and the CLI."""
from __future__ import annotations
import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

def setup_logging(level: int = logging.WARNING, format_string: Optional[str] = None) -> None:
    """Configure the ``sunder`` logger hierarchy to write to stderr.

    Safe to call more than once; the previous handler is replaced.
    """
    logger = logging.getLogger("sunder")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)

def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module."""
    return logging.getLogger(f"sunder.{name}")
