"""Utility modules for lazyical.

Provides:
- logger: get_logger for logging
"""

from lazyical.utils.logger import get_logger

__all__ = ["get_logger"]
