"""Console logging setup."""
from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "studiobot-rich"


def configure_logging(debug: bool, console: Optional[Console] = None) -> logging.Logger:
    """Route ``studiobot`` log records to a rich handler.

    ``debug`` only changes how much is traced; it never changes behaviour.
    Calling this again replaces the previously installed handler.
    """
    logger = logging.getLogger("studiobot")
    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = RichHandler(console=console, show_path=False, markup=False, rich_tracebacks=True)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False
    return logger
