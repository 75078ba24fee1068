"""
Logging configuration for detabase.

Verbosity levels:
    0: WARNING (default)
    1: INFO (-v)
    2: DEBUG (-vv)
    3: TRACE (-vvv), DEBUG plus httpx/httpcore wire logging

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import logging
import sys

LOG_FORMAT = "%(levelname)s: %(message)s"
DEBUG_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Third-party loggers that are only opened up at trace level
LIBRARY_LOGGERS = ("httpx", "httpcore")


def setup_logging(verbose: int = 0) -> None:
    """
    Configure logging for the CLI based on verbosity count.

    Args:
        verbose: Number of -v flags given
    """
    if verbose >= 2:
        level = logging.DEBUG
        fmt = DEBUG_LOG_FORMAT
    elif verbose == 1:
        level = logging.INFO
        fmt = LOG_FORMAT
    else:
        level = logging.WARNING
        fmt = LOG_FORMAT

    logging.basicConfig(level=level, format=fmt, stream=sys.stderr, force=True)

    library_level = logging.DEBUG if verbose >= 3 else logging.WARNING
    for name in LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)


def get_logger(name: str) -> logging.Logger:
    """
    Get a module logger.

    Args:
        name: Logger name, usually ``__name__``

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
