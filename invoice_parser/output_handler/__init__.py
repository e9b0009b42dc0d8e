"""
Output Handler Module for Invoice Parser.

This module provides functionality for:
    - JSON serialization (pretty-printed)
    - Two-section CSV serialization
    - Output format selection (json, csv, both)

Author: ML Engineering Team
"""

from .handler import OutputHandler
from .formatter import OutputFormatter

__all__ = ['OutputHandler', 'OutputFormatter']
