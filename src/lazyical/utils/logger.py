"""Minimal logging utilities for lazyical.

Example:
    >>> from lazyical.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Decoding VCALENDAR")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "lazyical." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'lazyical.mymodule'
    """
    if not (name == "lazyical" or name.startswith("lazyical.")):
        name = f"lazyical.{name}"
    return logging.getLogger(name)
