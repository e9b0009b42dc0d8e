"""
Data Model Module for Invoice Parser.

This module defines the canonical record produced by every extraction
strategy:
    - InvoiceRecord: header fields, totals and line items
    - LineItem: one itemized charge

Author: ML Engineering Team
"""

from .invoice_record import InvoiceRecord, LineItem, NOT_AVAILABLE, VALIDATION_TOLERANCE

__all__ = ['InvoiceRecord', 'LineItem', 'NOT_AVAILABLE', 'VALIDATION_TOLERANCE']
