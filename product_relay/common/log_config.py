"""
Logging Configuration

Configures logging for the relay. Output goes to stderr so that stdout
carries only the destination's acknowledgement.

In verbose mode every line is timestamped, so the GET and POST of one
run can be timed against each other, and urllib3's connection pool
messages are shown to make socket reuse visible.
"""

import logging
import sys

DEFAULT_FORMAT = "%(levelname)-8s %(name)s: %(message)s"
VERBOSE_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)-8s %(name)s: %(message)s"
VERBOSE_DATEFMT = "%H:%M:%S"

# Loggers whose handlers setup_logging owns
_PACKAGE_LOGGER = "product_relay"
_POOL_LOGGER = "urllib3.connectionpool"


def _build_handler(verbose: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    if verbose:
        handler.setFormatter(logging.Formatter(VERBOSE_FORMAT, datefmt=VERBOSE_DATEFMT))
    else:
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    return handler


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure logging for the relay.

    Args:
        verbose: DEBUG level, timestamped lines, connection pool messages
        quiet: WARNING level (errors from failed fetches/sends still show)
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    handler = _build_handler(verbose)

    logger = logging.getLogger(_PACKAGE_LOGGER)
    logger.setLevel(level)
    # Safe to call repeatedly: each call replaces the previous handler
    logger.handlers.clear()
    logger.addHandler(handler)

    pool_logger = logging.getLogger(_POOL_LOGGER)
    pool_logger.handlers.clear()
    if verbose:
        pool_logger.setLevel(logging.DEBUG)
        pool_logger.addHandler(handler)
        pool_logger.propagate = False
    else:
        pool_logger.setLevel(logging.NOTSET)
        pool_logger.propagate = True
