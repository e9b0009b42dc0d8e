"""
Invoice Parser - Application Package.

This package extracts structured invoice data (header fields, totals and
line items) from PDF-derived text and CSV rows and normalizes it into a
single InvoiceRecord.

Modules:
    - models: InvoiceRecord and LineItem
    - postprocessor: Amount normalization and arithmetic validation
    - extraction: Rule tables, field extractors and line-item detection
    - input_handler: Suffix dispatch, PDF text and CSV row decoding
    - output_handler: JSON and CSV serialization
    - parser: File, save and batch orchestration

Architecture:
    Input -> Extraction (PDF text | CSV rows) -> InvoiceRecord -> Output
                                                     |
                                                 Validation
"""

__version__ = "1.0.0"
__author__ = "ML Engineering Team"

__all__ = [
    'models',
    'postprocessor',
    'extraction',
    'input_handler',
    'output_handler',
    'parser',
    'utils'
]
