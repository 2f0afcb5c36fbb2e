"""Minimal logging utilities for javaprint.

Example:
    >>> from javaprint.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering signature")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "javaprint." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("printing.kinds").name
        'javaprint.printing.kinds'
    """
    if not (name == "javaprint" or name.startswith("javaprint.")):
        name = f"javaprint.{name}"
    return logging.getLogger(name)
