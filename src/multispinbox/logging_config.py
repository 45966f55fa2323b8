"""
Logging Configuration
=====================
Sets up the 'multispinbox' package logger.

Without arguments the level and the optional log file come from `config`
(env MULTISPINBOX_LOG_LEVEL / MULTISPINBOX_LOG_FILE), so the model's DEBUG
traces of split, validate and structural edits can be switched on without
touching code.
"""
import logging
import sys
from typing import Optional

from multispinbox import config

LOGGER_NAME = "multispinbox"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def _make_handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'multispinbox' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG). Defaults to the level named
            by `config.LOG_LEVEL`.
        log_file: Optional path to save logs to a file. Defaults to
            `config.LOG_FILE`.

    Returns:
        The configured package logger.
    """
    if level is None:
        level = config.get_log_level()
    if log_file is None:
        log_file = config.LOG_FILE

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Re-initialisation replaces the handlers instead of stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_make_handler(logging.StreamHandler(sys.stdout), level))
    if log_file:
        logger.addHandler(_make_handler(logging.FileHandler(log_file, mode='w', encoding='utf-8'), level))

    logger.info(f"Logging initialized at {logging.getLevelName(level)}.")
    return logger
