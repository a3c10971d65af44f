"""Logging helpers for the marlea_parser package.

Library modules log through :func:`get_logger` under the ``marlea_parser``
namespace. The level defaults to WARNING and can be overridden with the
``MARLEA_LOG`` environment variable (a level name or an integer).
"""

import logging
import os
import time

LOG_LEVEL_ENV_VAR = "MARLEA_LOG"
BASE_LOGGER_NAME = "marlea_parser"
NAMED_LOG_LEVELS = {
    "NOTSET": logging.NOTSET,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def formatter(time_utc=False):
    """Build a logging formatter using local or UTC time."""
    log_fmt = logging.Formatter(
        "%(asctime)s.%(msecs).3d - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if time_utc:
        log_fmt.converter = time.gmtime
    return log_fmt


def parse_level(level):
    """Convert a level name or integer (as str or int) to a logging level."""
    if isinstance(level, int):
        return level
    try:
        return int(level)
    except ValueError:
        if level in NAMED_LOG_LEVELS:
            return NAMED_LOG_LEVELS[level]
        raise ValueError(
            f'Invalid log level "{level}". Must be one of '
            f"{', '.join(NAMED_LOG_LEVELS)} (case-sensitive) or an integer."
        )


def setup_logger(level=logging.WARNING, console_output=True, time_utc=False):
    """Set up the base ``marlea_parser`` logger, replacing existing handlers.

    Parameters
    ----------
    level : int or str
        Logging level; overridden by the ``MARLEA_LOG`` environment variable
    console_output : bool
        Attach a stderr handler if True (default)
    time_utc : bool
        Use UTC time stamps in log entries

    Returns:
    -------
    logging.Logger
        The base logger
    """
    if LOG_LEVEL_ENV_VAR in os.environ:
        level = os.environ[LOG_LEVEL_ENV_VAR]

    log = logging.getLogger(BASE_LOGGER_NAME)
    log.setLevel(parse_level(level))
    log.handlers = []

    if console_output:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter(time_utc=time_utc))
        log.addHandler(stream_handler)

    return log


def get_logger(logger_name=BASE_LOGGER_NAME):
    """Return a logger in the ``marlea_parser`` namespace.

    The base logger is left unconfigured (no handlers) until
    :func:`setup_logger` is called, so importing the library never prints.
    """
    base = logging.getLogger(BASE_LOGGER_NAME)
    if not base.handlers:
        base.addHandler(logging.NullHandler())
    return logging.getLogger(logger_name)
