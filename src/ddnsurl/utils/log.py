"""utils/log.py

Logging helpers for ddnsurl.

The library never configures handlers; applications do.
"""

import logging

PACKAGE_LOGGER = "ddnsurl"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """Return the package logger, or a child of it for dotted names."""
    return logging.getLogger(name)
