"""
Logging configuration.

While curses owns the screen anything written to stderr is lost or
garbles the display, so a log file is the useful target during a session.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_LEVELS = {0: logging.WARNING, 1: logging.INFO}


def level_for(verbosity: int) -> int:
    return _LEVELS.get(verbosity, logging.DEBUG)


def setup_logging(verbosity: int = 0, log_file: Optional[str] = None) -> logging.Logger:
    """Configure the ``termclock`` logger and return it."""
    logger = logging.getLogger("termclock")
    logger.setLevel(level_for(verbosity))
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
