"""Utilities module for common helper functions.

This module contains:
- Structured diagnostic logging
"""

from sprig.utils.logger import configure_logging, get_logger

__all__ = [
    'configure_logging', 'get_logger',
]
