"""
Post-Processing Module for Invoice Parser.

This module provides functionality for:
    - Amount/currency normalization
    - Quantity parsing
    - Arithmetic consistency validation

Author: ML Engineering Team
"""

from .normalizers import AmountNormalizer, QuantityNormalizer, parse_amount
from .validators import InvoiceValidator, ValidationResult, is_valid

__all__ = [
    'AmountNormalizer',
    'QuantityNormalizer',
    'parse_amount',
    'InvoiceValidator',
    'ValidationResult',
    'is_valid'
]
