"""
Logging Configuration for the Projection Engine.

All modules obtain their logger through :func:`get_logger` so records share
one format. The numeric code logs sparingly: derived-term recomputation,
solver iteration-cap exhaustion and projector disposal, all at DEBUG.
"""

import logging
import sys
from typing import Optional


LOG_FORMAT = '%(asctime)s | %(name)s | %(levelname)s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Get a logger configured for the projection engine.

    Parameters
    ----------
    name : str
        Logger name (typically __name__).
    level : int, optional
        Logging level. When omitted the logger keeps its current level,
        so :func:`set_log_level` calls made earlier are not undone.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        if level is None and logger.level == logging.NOTSET:
            logger.setLevel(logging.INFO)

    if level is not None:
        logger.setLevel(level)
    return logger


def set_log_level(level: int, prefixes=("numerics", "projectors")) -> None:
    """Set the level of every engine logger created so far.

    Parameters
    ----------
    level : int
        New logging level, e.g. ``logging.DEBUG``.
    prefixes : tuple of str
        Logger name prefixes to update.
    """
    for name in list(logging.root.manager.loggerDict):
        if name.startswith(tuple(prefixes)):
            logging.getLogger(name).setLevel(level)
