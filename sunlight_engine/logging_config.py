# sunlight_engine/logging_config.py
"""
Package logger for sunlight_engine.

Engine modules only call logging.getLogger(__name__) and never configure
handlers. Hosts (the API, demos) call setup_logging() once at startup.
"""

import logging
import sys
from typing import Optional

LOGGER_NAME = "sunlight_engine"
LOG_FORMAT = '%(asctime)s %(levelname)-7s %(name)s: %(message)s'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach a stdout handler (and a file handler if `log_file` is given) to the
    package logger. Calling it again replaces the handlers.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to %s", log_file or "stdout")
    return logger
