"""
Data Validators Module.

This module provides the arithmetic consistency check for invoice records.
Validation is informational only: it never rejects or repairs a record.

Author: ML Engineering Team
"""

from typing import List, Dict, Any

from invoice_parser.models import InvoiceRecord, NOT_AVAILABLE, VALIDATION_TOLERANCE
from invoice_parser.utils.logger import get_logger

# Initialize module logger
logger = get_logger(__name__)


class ValidationResult:
    """
    Contains the result of validation checks.

    Attributes:
        is_valid: Overall arithmetic consistency
        errors: List of error messages
        warnings: List of warning messages (missing fields, no items)
        difference: subtotal + tax - total
    """

    def __init__(self):
        self.is_valid = True
        self.errors: List[str] = []
        self.warnings: List[str] = []
        self.difference = 0.0

    def add_error(self, message: str) -> None:
        """Add an error and mark as invalid."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a warning (doesn't affect validity)."""
        self.warnings.append(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'is_valid': self.is_valid,
            'errors': self.errors,
            'warnings': self.warnings,
            'difference': self.difference
        }


class InvoiceValidator:
    """
    Checks that subtotal + tax equals total within a fixed tolerance.

    Example:
        >>> validator = InvoiceValidator()
        >>> validator.is_valid(InvoiceRecord(subtotal=100.0, tax_amount=13.0,
        ...                                  total_amount=113.0))
        True
    """

    def __init__(self) -> None:
        self.tolerance = VALIDATION_TOLERANCE

    def is_valid(self, record: InvoiceRecord) -> bool:
        """
        Check arithmetic consistency of a record.

        Args:
            record: Record to check. It is not modified.

        Returns:
            True if |subtotal + tax_amount - total_amount| < tolerance.
        """
        return record.is_valid(self.tolerance)

    def validate(self, record: InvoiceRecord) -> ValidationResult:
        """
        Validate a record with detailed feedback.

        Args:
            record: Record to check. It is not modified.

        Returns:
            ValidationResult with the arithmetic outcome plus warnings for
            header fields that were never matched.
        """
        result = ValidationResult()
        result.difference = record.subtotal + record.tax_amount - record.total_amount

        if not self.is_valid(record):
            result.add_error(
                f"Subtotal ({record.subtotal:.2f}) + tax ({record.tax_amount:.2f}) "
                f"does not match total ({record.total_amount:.2f})"
            )

        for field_name in ('invoice_number', 'invoice_date', 'vendor_name'):
            if getattr(record, field_name) == NOT_AVAILABLE:
                result.add_warning(f"Missing field: {field_name}")

        if not record.items:
            result.add_warning("No line items found")

        logger.debug(f"Validation: {len(result.errors)} error(s), {len(result.warnings)} warning(s)")
        return result


def is_valid(record: InvoiceRecord) -> bool:
    """Pure arithmetic consistency check with the default tolerance."""
    return record.is_valid(VALIDATION_TOLERANCE)
