"""
Invoice Record Data Classes.

This module defines the canonical output of extraction: an InvoiceRecord
holding header fields, monetary totals and an ordered list of LineItems.

Author: ML Engineering Team
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List
import json

# Placeholder stored in string fields that no rule matched
NOT_AVAILABLE = "N/A"

# Maximum |subtotal + tax - total| for a record to be consistent
VALIDATION_TOLERANCE = 0.01


@dataclass
class LineItem:
    """
    One row of an invoice's itemized charges.

    No cross-field invariant is enforced: quantity * unit_price need not
    equal line_total. The values are whatever appeared in the source.

    Attributes:
        description: Trimmed, non-empty item description
        quantity: Non-negative item count
        unit_price: Price per unit
        line_total: Total for the line as printed on the document
    """
    description: str
    quantity: int = 0
    unit_price: float = 0.0
    line_total: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format."""
        return {
            'description': self.description,
            'quantity': self.quantity,
            'unit_price': self.unit_price,
            'line_total': self.line_total
        }


@dataclass
class InvoiceRecord:
    """
    Canonical structured invoice produced by an extraction strategy.

    A record is created empty by an extractor and filled in field by field
    as rules match. Fields that never match keep their defaults, so a
    record is always complete.

    Attributes:
        invoice_number: Invoice identifier ("N/A" when unmatched)
        invoice_date: Raw date token as found ("N/A" when unmatched)
        vendor_name: Seller name ("N/A" when unmatched)
        vendor_address: Reserved, always empty
        customer_name: Reserved, always empty
        customer_address: Reserved, always empty
        subtotal: Amount before tax
        tax_amount: Tax charged
        total_amount: Amount due
        items: Line items in extraction order

    Example:
        >>> record = InvoiceRecord(invoice_number="INV-001", subtotal=100.0,
        ...                        tax_amount=13.0, total_amount=113.0)
        >>> record.is_valid()
        True
    """
    invoice_number: str = NOT_AVAILABLE
    invoice_date: str = NOT_AVAILABLE
    vendor_name: str = NOT_AVAILABLE
    vendor_address: str = ""
    customer_name: str = ""
    customer_address: str = ""
    subtotal: float = 0.0
    tax_amount: float = 0.0
    total_amount: float = 0.0
    items: List[LineItem] = field(default_factory=list)

    # Names of the single-valued header fields, in output order
    HEADER_FIELDS = (
        'invoice_number',
        'invoice_date',
        'vendor_name',
        'subtotal',
        'tax_amount',
        'total_amount',
    )

    def add_item(self, item: LineItem) -> None:
        """Append a line item, keeping extraction order."""
        self.items.append(item)

    def set_field(self, field_name: str, value: Any) -> None:
        """
        Set a header field by name.

        Args:
            field_name: One of HEADER_FIELDS.
            value: Extracted value.

        Raises:
            KeyError: If field_name is not a header field.
        """
        if field_name not in self.HEADER_FIELDS:
            raise KeyError(f"Unknown invoice field: {field_name}")
        setattr(self, field_name, value)

    @property
    def item_count(self) -> int:
        """Number of extracted line items."""
        return len(self.items)

    def is_valid(self, tolerance: float = VALIDATION_TOLERANCE) -> bool:
        """
        Check that subtotal + tax matches total within tolerance.

        Returns:
            True if |subtotal + tax_amount - total_amount| < tolerance.
        """
        calculated_total = self.subtotal + self.tax_amount
        return abs(calculated_total - self.total_amount) < tolerance

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary format.

        Returns:
            Dictionary keyed by attribute name, items as nested dicts.
        """
        return {
            'invoice_number': self.invoice_number,
            'invoice_date': self.invoice_date,
            'vendor_name': self.vendor_name,
            'vendor_address': self.vendor_address,
            'customer_name': self.customer_name,
            'customer_address': self.customer_address,
            'subtotal': self.subtotal,
            'tax_amount': self.tax_amount,
            'total_amount': self.total_amount,
            'items': [item.to_dict() for item in self.items]
        }

    def to_json(self, indent: int = 2) -> str:
        """
        Convert to JSON string.

        Args:
            indent: JSON indentation level.

        Returns:
            Pretty-printed JSON representation.
        """
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def __repr__(self) -> str:
        return (
            f"InvoiceRecord("
            f"invoice={self.invoice_number}, "
            f"vendor={self.vendor_name}, "
            f"total={self.total_amount}, "
            f"items={self.item_count})"
        )
