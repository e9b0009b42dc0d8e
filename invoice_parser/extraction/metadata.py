"""
Key/Value Metadata Extractor Module.

CSV invoices usually open with a block of "Key,Value" rows. This module
reads that block through the bilingual alias table in rules.py.

Author: ML Engineering Team
"""

from typing import Any, Dict, Optional, Sequence

from config import get_config
from invoice_parser.models import InvoiceRecord
from invoice_parser.postprocessor.normalizers import AmountNormalizer
from invoice_parser.utils.logger import get_logger
from .rules import (
    AMOUNT,
    METADATA_ALIAS_LOOKUP,
    METADATA_MIN_COLUMNS,
    METADATA_SCAN_ROWS,
    MetadataAlias,
)

# Initialize module logger
logger = get_logger(__name__)


class KeyValueMetadataExtractor:
    """
    Interprets leading rows as key/value metadata pairs.

    Only the first `scan_rows` rows are examined. Keys are trimmed and
    lower-cased before lookup; unknown keys are ignored. When several
    rows map to the same field, the last one wins.

    Attributes:
        scan_rows: Number of leading rows inspected
        alias_lookup: Normalized key -> MetadataAlias

    Example:
        >>> extractor = KeyValueMetadataExtractor()
        >>> extractor.extract([["Invoice Number", "INV-001"], ["Total", "$10.00"]])
        {'invoice_number': 'INV-001', 'total_amount': 10.0}
    """

    def __init__(
        self,
        scan_rows: Optional[int] = None,
        alias_lookup: Dict[str, MetadataAlias] = METADATA_ALIAS_LOOKUP
    ) -> None:
        """
        Initialize the extractor.

        Args:
            scan_rows: Rows to inspect. If None, uses config.
            alias_lookup: Key alias table. Defaults to METADATA_ALIAS_LOOKUP.
        """
        if scan_rows is None:
            scan_rows = get_config("extraction.metadata_scan_rows", METADATA_SCAN_ROWS)
        self.scan_rows = scan_rows
        self.alias_lookup = alias_lookup
        self.amount_normalizer = AmountNormalizer()

    def extract(self, rows: Sequence[Sequence[str]]) -> Dict[str, Any]:
        """
        Collect metadata fields from the leading rows.

        Args:
            rows: Ordered rows of string cells.

        Returns:
            Dictionary of the fields that were found. Missing fields are
            absent so that record defaults stay in place.
        """
        fields: Dict[str, Any] = {}

        for row in rows[:self.scan_rows]:
            if len(row) < METADATA_MIN_COLUMNS:
                continue

            key = row[0].strip().lower()
            entry = self.alias_lookup.get(key)
            if entry is None:
                continue

            value = row[1].strip()
            if entry.kind == AMOUNT:
                fields[entry.field_name] = self.amount_normalizer.normalize(value)
            else:
                fields[entry.field_name] = value
            logger.debug(f"Metadata {entry.field_name} <- {value!r}")

        return fields

    def populate(self, record: InvoiceRecord, rows: Sequence[Sequence[str]]) -> InvoiceRecord:
        """
        Fill the header fields of a record from metadata rows.

        Args:
            record: Record to update in place.
            rows: Ordered rows of string cells.

        Returns:
            The same record, for chaining.
        """
        for field_name, value in self.extract(rows).items():
            record.set_field(field_name, value)
        return record
