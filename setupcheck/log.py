"""Diagnostic logging setup."""

import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV = "SETUPCHECK_LOG_LEVEL"


def configure_logging(level: Optional[str] = None) -> int:
    """
    Route the package's loggers through rich on stderr.

    The report itself goes to stdout, so diagnostics never mix into it.

    Args:
        level: Level name; falls back to SETUPCHECK_LOG_LEVEL, then WARNING

    Returns:
        The numeric level that was applied
    """
    name = (level or os.environ.get(LOG_LEVEL_ENV) or "WARNING").upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        numeric = logging.WARNING

    logger = logging.getLogger("setupcheck")
    logger.setLevel(numeric)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)

    logger.propagate = False
    return numeric
