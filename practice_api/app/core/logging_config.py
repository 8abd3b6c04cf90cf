"""
Logging configuration for the service.

``setup_logging`` configures the ``practice_api`` logger namespace that
every module logs under (``logging.getLogger(__name__)``), leaving the
root logger and the uvicorn loggers to the server.  Handlers are
attached once; later calls only adjust the level, so building several
applications in one process (as the tests do) does not duplicate
output.
"""

import logging
from pathlib import Path
from typing import Optional


PACKAGE_LOGGER = "practice_api"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure and return the service logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file that receives the service's records in addition
        to the console.  Only honoured on the first call.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
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

    # Our handlers already write everything; don't repeat it through root.
    logger.propagate = False
    return logger
