"""
Utility Module for Invoice Parser.

This module provides common utilities used across all other modules:
    - Logging configuration
    - Exceptions
    - File and formatting helpers
"""

from .logger import setup_logger, get_logger
from .helpers import ensure_directory, get_file_extension, format_amount

__all__ = [
    'setup_logger',
    'get_logger',
    'ensure_directory',
    'get_file_extension',
    'format_amount'
]
