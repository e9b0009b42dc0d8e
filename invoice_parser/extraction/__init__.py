"""
Extraction Engine Module for Invoice Parser.

This module turns raw document content into InvoiceRecords using
heuristic, rule-table driven matching:
    - TextFieldExtractor: regex rules over PDF text
    - KeyValueMetadataExtractor: bilingual key aliases over CSV rows
    - TabularLineItemDetector: line-item tables in rows or text
    - InvoiceExtractor: tagged strategy selecting PDF or CSV path

Author: ML Engineering Team
"""

from .text_extractor import TextFieldExtractor
from .metadata import KeyValueMetadataExtractor
from .line_items import TabularLineItemDetector
from .strategy import (
    SourceKind,
    InvoiceExtractor,
    extract_from_text,
    extract_from_rows,
    extract_invoice
)

__all__ = [
    'TextFieldExtractor',
    'KeyValueMetadataExtractor',
    'TabularLineItemDetector',
    'SourceKind',
    'InvoiceExtractor',
    'extract_from_text',
    'extract_from_rows',
    'extract_invoice'
]
