"""Logging utilities.

Components never log through a hidden global: the retriever, the brand
extractor and the AI supplement accept an explicit ``logger`` argument and
only fall back to their module logger when none is given.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "INFO") -> None:
    """Attach a single rich console handler to the root logger.

    Args:
        level: Logging level name.
    """
    # Diagnostics go to stderr so command output on stdout stays clean.
    handler = RichHandler(
        console=Console(stderr=True), rich_tracebacks=True, show_time=True, show_level=True
    )
    handler.setFormatter(logging.Formatter(fmt="%(name)s: %(message)s", datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.setLevel(level.upper())
    # Avoid duplicate handlers if configure_logging is called multiple times
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""
    return logging.getLogger(name)
