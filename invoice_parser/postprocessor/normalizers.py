"""
Data Normalizers Module.

This module provides normalization of free-form values found on invoices:
    - Currency/amount values
    - Integer quantities

Normalization never raises. Unparseable amounts become 0.0 so that a bad
value can never abort extraction of the rest of a document.

Author: ML Engineering Team
"""

import re
from typing import Optional

from invoice_parser.utils.logger import get_logger

# Initialize module logger
logger = get_logger(__name__)


class AmountNormalizer:
    """
    Normalizes currency/amount strings to a float.

    Only comma-as-thousands and period-as-decimal is supported, so
    European strings such as "1.234,56" are not read correctly.

    Attributes:
        strip_pattern: Regex matching every character removed before parsing

    Example:
        >>> normalizer = AmountNormalizer()
        >>> normalizer.normalize("$1,234.56")
        1234.56
        >>> normalizer.normalize("12.50 €")
        12.5
        >>> normalizer.normalize("abc")
        0.0
    """

    # Currency glyphs stripped wherever they appear
    CURRENCY_SYMBOLS = ['$', '€', '£', '¥']

    # Thousands separator
    THOUSANDS_SEPARATOR = ','

    # Plain decimal number with period as fractional separator
    NUMBER_PATTERN = re.compile(r'^[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$')

    def __init__(self) -> None:
        """Initialize the amount normalizer."""
        removable = re.escape(self.THOUSANDS_SEPARATOR + ''.join(self.CURRENCY_SYMBOLS))
        self.strip_pattern = re.compile(rf'[{removable}\s]')

    def clean(self, amount_str: Optional[str]) -> str:
        """
        Remove separators, currency glyphs and whitespace.

        Args:
            amount_str: Raw amount string.

        Returns:
            Cleaned amount string, possibly empty.
        """
        if not amount_str:
            return ""
        return self.strip_pattern.sub('', amount_str)

    def normalize(self, amount_str: Optional[str]) -> float:
        """
        Normalize an amount string to a float.

        Args:
            amount_str: Input amount string (e.g., "$1,234.56").

        Returns:
            Parsed value, or 0.0 for empty or unparseable input.
        """
        cleaned = self.clean(amount_str)

        if not cleaned:
            return 0.0

        if not self.NUMBER_PATTERN.match(cleaned):
            logger.debug(f"Could not parse amount: {amount_str!r}")
            return 0.0

        try:
            return float(cleaned)
        except ValueError:
            logger.debug(f"Could not parse amount: {amount_str!r}")
            return 0.0


class QuantityNormalizer:
    """
    Parses line-item quantities.

    Unlike amounts, a bad quantity is reported as None so the caller can
    drop the whole row instead of inventing a zero.

    Example:
        >>> QuantityNormalizer().normalize(" 3 ")
        3
        >>> QuantityNormalizer().normalize("three") is None
        True
    """

    INTEGER_PATTERN = re.compile(r'^\+?[0-9]+$')

    def normalize(self, quantity_str: Optional[str]) -> Optional[int]:
        """
        Parse a non-negative integer quantity.

        Args:
            quantity_str: Raw cell or token text.

        Returns:
            Integer quantity, or None if the text is not an integer.
        """
        if quantity_str is None:
            return None

        quantity_str = quantity_str.strip()
        if not self.INTEGER_PATTERN.match(quantity_str):
            return None

        return int(quantity_str)


_amount_normalizer = AmountNormalizer()


def parse_amount(amount_str: Optional[str]) -> float:
    """
    Module-level shortcut for AmountNormalizer().normalize().

    Example:
        >>> parse_amount("$1,234.56")
        1234.56
        >>> parse_amount("")
        0.0
    """
    return _amount_normalizer.normalize(amount_str)
