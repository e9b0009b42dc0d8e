"""
CSV Processor Module.

This module tokenizes a CSV invoice into rows of string cells for the
extraction engine. Uses the standard csv module (comma-delimited,
double-quote escaped).

Author: ML Engineering Team
"""

import csv
from pathlib import Path
from typing import List, Union, Optional

from config import get_config
from invoice_parser.utils.logger import get_logger
from invoice_parser.utils.exceptions import CorruptedFileError, EmptyDocumentError

# Initialize module logger
logger = get_logger(__name__)


class CSVProcessor:
    """
    Processor for CSV files.

    Attributes:
        encoding: Text encoding used to open files

    Example:
        >>> processor = CSVProcessor()
        >>> rows = processor.read_rows("invoice.csv")
        >>> rows[0]
        ['Invoice Number', 'INV-001']
    """

    def __init__(self, encoding: Optional[str] = None) -> None:
        """
        Initialize the CSV processor.

        Args:
            encoding: File encoding. If None, uses config.
        """
        self.encoding = encoding or get_config("input.csv.encoding", "utf-8-sig")

    def read_rows(self, filepath: Union[str, Path]) -> List[List[str]]:
        """
        Read every row of a CSV file.

        Args:
            filepath: Path to the CSV file.

        Returns:
            Rows of string cells in file order.

        Raises:
            CorruptedFileError: If the file cannot be decoded or tokenized.
            EmptyDocumentError: If the file contains no rows.
        """
        filepath = Path(filepath)
        logger.debug(f"Reading CSV: {filepath.name}")

        try:
            with open(filepath, 'r', encoding=self.encoding, newline='') as f:
                rows = list(csv.reader(f))
        except (UnicodeDecodeError, csv.Error) as e:
            logger.error(f"CSV read failed: {e}")
            raise CorruptedFileError(str(filepath), str(e))

        if not rows:
            raise EmptyDocumentError(str(filepath))

        logger.debug(f"Read {len(rows)} rows")
        return rows
