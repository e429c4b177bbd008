"""
Logging configuration for the application.

``setup_logging`` attaches a console handler and an optional file
handler to the ``chukgo_api`` logger, the parent of every module
logger in the package.  Third‑party loggers keep their own
configuration, except ``uvicorn.access``: the request middleware in
``main`` already writes one line per API call, so uvicorn's access
log is limited to warnings.
"""

import logging
from pathlib import Path
from typing import Optional

APP_LOGGER = "chukgo_api"
QUIET_LOGGERS = ("uvicorn.access",)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure and return the application logger.

    Handlers are attached only once; later calls (a second
    ``create_app`` in the same process) only update the level.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, no file
        handler is added.
    """
    logger = logging.getLogger(APP_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    return logger
