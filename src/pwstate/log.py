"""Logger construction.

A single named logger is built per run and handed to each component. Nothing
here touches the root logger.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "pwstate"


def build_logger(debug: bool = False, console: Optional[Console] = None) -> logging.Logger:
    """Return the ``pwstate`` logger writing through rich to stdout."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(),
        show_path=False,
        log_time_format="[%Y-%m-%d %H:%M:%S]",
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False
    return logger
