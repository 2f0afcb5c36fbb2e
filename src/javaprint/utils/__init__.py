"""Utility modules for javaprint.

Provides:
- logger: get_logger for logging
"""

from javaprint.utils.logger import get_logger

__all__ = ["get_logger"]
