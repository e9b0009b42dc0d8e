"""
Input Handler Module for Invoice Parser.

This module provides functionality for:
    - Detecting file types by suffix (PDF vs CSV)
    - Validating input files
    - Decoding PDF text (pdfplumber)
    - Tokenizing CSV rows

Supported formats:
    - PDF (digital, text-based)
    - CSV

Author: ML Engineering Team
"""

from .handler import InputHandler, InputDocument
from .pdf_processor import PDFProcessor
from .csv_processor import CSVProcessor

__all__ = ['InputHandler', 'InputDocument', 'PDFProcessor', 'CSVProcessor']
