"""
Tabular Line Item Detector Module.

This module finds the itemized charges of an invoice in either of the two
input shapes:

    - Rows (CSV path): locate the first header row naming description,
      quantity and price columns, then read every following row.
    - Free text (PDF path): scan for "<words> <qty> <price> <total>" runs.

Faults are isolated per row: a row whose quantity is not an integer is
dropped and scanning continues. Finding no items is not an error.

Author: ML Engineering Team
"""

import re
from typing import List, Optional, Sequence, Tuple

from invoice_parser.models import LineItem
from invoice_parser.postprocessor.normalizers import AmountNormalizer, QuantityNormalizer
from invoice_parser.utils.logger import get_logger
from .rules import (
    LINE_ITEM_HEADER_KEYWORDS,
    LINE_ITEM_MIN_COLUMNS,
    LINE_ITEM_TEXT_PATTERN,
)

# Initialize module logger
logger = get_logger(__name__)

Row = Sequence[str]


class TabularLineItemDetector:
    """
    Detects line-item tables in row sequences and free text.

    Attributes:
        header_keywords: Keyword groups a header row must satisfy
        min_columns: Minimum cells for header and item rows
        text_pattern: Regex for free-text line items

    Example:
        >>> detector = TabularLineItemDetector()
        >>> rows = [["Description", "Qty", "Unit Price", "Total"],
        ...         ["Widget A", "3", "$10.00", "$30.00"]]
        >>> detector.detect_in_rows(rows)
        [LineItem(description='Widget A', quantity=3, unit_price=10.0, line_total=30.0)]
    """

    def __init__(
        self,
        header_keywords: Tuple[Tuple[str, ...], ...] = LINE_ITEM_HEADER_KEYWORDS,
        min_columns: int = LINE_ITEM_MIN_COLUMNS,
        text_pattern: re.Pattern = LINE_ITEM_TEXT_PATTERN
    ) -> None:
        self.header_keywords = header_keywords
        self.min_columns = min_columns
        self.text_pattern = text_pattern
        self.amount_normalizer = AmountNormalizer()
        self.quantity_normalizer = QuantityNormalizer()

    # ------------------------------------------------------------------
    # Row-oriented input
    # ------------------------------------------------------------------

    def is_header_row(self, row: Row) -> bool:
        """
        Check whether a row looks like the line-item header.

        Args:
            row: Sequence of cell strings.

        Returns:
            True if the row has enough cells and its joined, lower-cased
            text contains a keyword from every keyword group.
        """
        if len(row) < self.min_columns:
            return False

        combined = ' '.join(row).lower()
        return all(
            any(keyword in combined for keyword in group)
            for group in self.header_keywords
        )

    def find_items_start(self, rows: Sequence[Row]) -> Optional[int]:
        """
        Locate the first row after the line-item header.

        Returns:
            Index of the first candidate item row, or None if no header.
        """
        for index, row in enumerate(rows):
            if self.is_header_row(row):
                logger.debug(f"Line item header found at row {index}")
                return index + 1
        return None

    def detect_in_rows(self, rows: Sequence[Row]) -> List[LineItem]:
        """
        Extract line items from a row sequence.

        Args:
            rows: Ordered rows of string cells.

        Returns:
            Line items in row order; empty if no header row exists.
        """
        items_start = self.find_items_start(rows)
        if items_start is None:
            logger.debug("No line item header found")
            return []

        items = []
        for index in range(items_start, len(rows)):
            item = self.parse_row(rows[index])
            if item is None:
                continue
            items.append(item)

        logger.debug(f"Detected {len(items)} line items in rows")
        return items

    def parse_row(self, row: Row) -> Optional[LineItem]:
        """
        Convert one candidate row into a LineItem.

        Returns:
            LineItem, or None when the row is too short, has an empty
            description or a non-integer quantity.
        """
        if len(row) < self.min_columns:
            return None

        description = row[0].strip()
        if not description:
            return None

        quantity = self.quantity_normalizer.normalize(row[1])
        if quantity is None:
            logger.debug(f"Skipping row with invalid quantity: {list(row)}")
            return None

        return LineItem(
            description=description,
            quantity=quantity,
            unit_price=self.amount_normalizer.normalize(row[2]),
            line_total=self.amount_normalizer.normalize(row[3])
        )

    # ------------------------------------------------------------------
    # Free-text input
    # ------------------------------------------------------------------

    def detect_in_text(self, text: str) -> List[LineItem]:
        """
        Extract line items from free text.

        Any run shaped like "<words> <integer> <money> <money>" is taken
        as an item, including lookalikes such as a totals line.
        Tokens may be separated by newlines, so a word-only line above an
        item (such as a column header) becomes part of its description.
        Descriptions containing digits or punctuation are not matched.

        Args:
            text: Full decoded document text.

        Returns:
            Line items in document order.
        """
        items = []
        for match in self.text_pattern.finditer(text):
            description, quantity, unit_price, line_total = match.groups()
            items.append(LineItem(
                description=description.strip(),
                quantity=int(quantity),
                unit_price=self.amount_normalizer.normalize(unit_price),
                line_total=self.amount_normalizer.normalize(line_total)
            ))

        logger.debug(f"Detected {len(items)} line items in text")
        return items
