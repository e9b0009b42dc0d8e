"""
Extraction Strategy Module.

PDF text and CSV rows share no extraction logic beyond the record they
produce. Each input shape is a tagged strategy:

    SourceKind.PDF_TEXT  -> TextFieldExtractor + TabularLineItemDetector.detect_in_text
    SourceKind.CSV_ROWS  -> KeyValueMetadataExtractor + TabularLineItemDetector.detect_in_rows

Usage:
    from invoice_parser.extraction import extract_invoice

    record = extract_invoice("Invoice #INV-42\\nTotal: $150.00")
    record = extract_invoice([["Invoice Number", "INV-001"]])

Author: ML Engineering Team
"""

from collections import abc
from enum import Enum
from typing import Optional, Sequence, Union

from invoice_parser.models import InvoiceRecord
from invoice_parser.utils.logger import get_logger
from .line_items import TabularLineItemDetector
from .metadata import KeyValueMetadataExtractor
from .text_extractor import TextFieldExtractor

# Initialize module logger
logger = get_logger(__name__)

Rows = Sequence[Sequence[str]]


class SourceKind(Enum):
    """Shape of the raw input handed to the engine."""
    PDF_TEXT = "pdf"
    CSV_ROWS = "csv"

    @classmethod
    def of(cls, source: Union[str, Rows]) -> 'SourceKind':
        """
        Infer the kind from the input shape.

        A string is decoded PDF text; any other sequence is CSV rows.

        Raises:
            TypeError: If source is neither a string nor a sequence.
        """
        if isinstance(source, str):
            return cls.PDF_TEXT
        if isinstance(source, abc.Sequence):
            return cls.CSV_ROWS
        raise TypeError(f"Cannot extract an invoice from {type(source).__name__}")


class InvoiceExtractor:
    """
    Builds InvoiceRecords from either input shape.

    The extractor holds only immutable rule tables, so one instance can
    serve any number of documents.

    Attributes:
        text_extractor: Header fields for PDF text
        metadata_extractor: Header fields for CSV rows
        line_item_detector: Line items for both shapes

    Example:
        >>> extractor = InvoiceExtractor()
        >>> record = extractor.extract_from_text("Invoice #INV-42\\nTotal: $150.00")
        >>> record.invoice_number
        'INV-42'
    """

    def __init__(
        self,
        text_extractor: Optional[TextFieldExtractor] = None,
        metadata_extractor: Optional[KeyValueMetadataExtractor] = None,
        line_item_detector: Optional[TabularLineItemDetector] = None
    ) -> None:
        self.text_extractor = text_extractor or TextFieldExtractor()
        self.metadata_extractor = metadata_extractor or KeyValueMetadataExtractor()
        self.line_item_detector = line_item_detector or TabularLineItemDetector()

    def extract_from_text(self, text: str) -> InvoiceRecord:
        """
        PDF path: extract a record from decoded document text.

        Args:
            text: Full newline-delimited document text.

        Returns:
            Populated InvoiceRecord.
        """
        record = InvoiceRecord()
        self.text_extractor.populate(record, text)

        for item in self.line_item_detector.detect_in_text(text):
            record.add_item(item)

        logger.debug(f"Extracted from text: {record!r}")
        return record

    def extract_from_rows(self, rows: Rows) -> InvoiceRecord:
        """
        CSV path: extract a record from tokenized rows.

        Args:
            rows: Ordered rows of string cells.

        Returns:
            Populated InvoiceRecord.
        """
        record = InvoiceRecord()
        self.metadata_extractor.populate(record, rows)

        for item in self.line_item_detector.detect_in_rows(rows):
            record.add_item(item)

        logger.debug(f"Extracted from rows: {record!r}")
        return record

    def extract(
        self,
        source: Union[str, Rows],
        kind: Optional[SourceKind] = None
    ) -> InvoiceRecord:
        """
        Dispatch to the strategy for the given or inferred source kind.

        Args:
            source: Decoded text or rows of cells.
            kind: Explicit kind. If None, inferred from the input shape.

        Returns:
            Populated InvoiceRecord.
        """
        kind = kind or SourceKind.of(source)

        if kind is SourceKind.PDF_TEXT:
            return self.extract_from_text(source)
        return self.extract_from_rows(source)


def extract_from_text(text: str) -> InvoiceRecord:
    """Extract a record from PDF-derived text with default rules."""
    return InvoiceExtractor().extract_from_text(text)


def extract_from_rows(rows: Rows) -> InvoiceRecord:
    """Extract a record from CSV rows with default rules."""
    return InvoiceExtractor().extract_from_rows(rows)


def extract_invoice(source: Union[str, Rows], kind: Optional[SourceKind] = None) -> InvoiceRecord:
    """Extract a record from text or rows, inferring the strategy from shape."""
    return InvoiceExtractor().extract(source, kind)
