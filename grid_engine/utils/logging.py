"""Logger setup shared by the API and the engine."""

import logging
import sys

from grid_engine.utils.config import Config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(name):
    """Set up a logger with proper formatting and a stdout handler."""
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO if Config.is_production() else logging.DEBUG)

    if not any(getattr(h, "_grid_engine", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._grid_engine = True
        logger.addHandler(handler)

    return logger
