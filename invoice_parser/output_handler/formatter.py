"""
Output Formatter Module.

This module serializes InvoiceRecords to JSON and to a two-section CSV
layout:

    Invoice Metadata
    Invoice Number,<value>
    Date,<value>
    Vendor,<value>
    Subtotal,<amount>
    Tax,<amount>
    Total,<amount>
    <blank line>
    Line Items
    Description,Quantity,Unit Price,Line Total
    <one row per item>

Amounts are written with two decimals. Cells containing a comma, quote
or newline are quoted with doubled quotes, so the layout can be read
back with any CSV reader.

Author: ML Engineering Team
"""

import csv
import io
import json
from pathlib import Path
from typing import Union, Optional

from config import get_config
from invoice_parser.models import InvoiceRecord
from invoice_parser.utils.logger import get_logger
from invoice_parser.utils.helpers import ensure_directory, format_amount
from invoice_parser.utils.exceptions import OutputWriteError

# Initialize module logger
logger = get_logger(__name__)


class OutputFormatter:
    """
    Formats and writes invoice records to JSON and CSV.

    Attributes:
        json_indent: Indentation for pretty-printed JSON

    Example:
        >>> formatter = OutputFormatter()
        >>> print(formatter.to_csv_string(record))
        >>> formatter.write_json(record, "output/invoice.json")
    """

    METADATA_SECTION = "Invoice Metadata"
    LINE_ITEMS_SECTION = "Line Items"
    LINE_ITEMS_HEADER = ["Description", "Quantity", "Unit Price", "Line Total"]

    def __init__(self, json_indent: Optional[int] = None) -> None:
        """
        Initialize the formatter.

        Args:
            json_indent: JSON indentation. If None, uses config.
        """
        self.json_indent = json_indent if json_indent is not None else \
            get_config("output.json.indent", 2)

    def to_json_string(self, record: InvoiceRecord) -> str:
        """Convert a record to pretty-printed JSON."""
        return json.dumps(record.to_dict(), indent=self.json_indent, ensure_ascii=False)

    def to_csv_string(self, record: InvoiceRecord) -> str:
        """
        Convert a record to the two-section CSV layout.

        Args:
            record: Record to serialize.

        Returns:
            CSV text with "\\n" line endings.
        """
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator='\n')

        writer.writerow([self.METADATA_SECTION])
        writer.writerow(["Invoice Number", record.invoice_number])
        writer.writerow(["Date", record.invoice_date])
        writer.writerow(["Vendor", record.vendor_name])
        writer.writerow(["Subtotal", format_amount(record.subtotal)])
        writer.writerow(["Tax", format_amount(record.tax_amount)])
        writer.writerow(["Total", format_amount(record.total_amount)])
        writer.writerow([])

        writer.writerow([self.LINE_ITEMS_SECTION])
        writer.writerow(self.LINE_ITEMS_HEADER)
        for item in record.items:
            writer.writerow([
                item.description,
                item.quantity,
                format_amount(item.unit_price),
                format_amount(item.line_total)
            ])

        return buffer.getvalue()

    def write_json(self, record: InvoiceRecord, output_path: Union[str, Path]) -> Path:
        """
        Write a record to a JSON file.

        Returns:
            Path of the written file.

        Raises:
            OutputWriteError: If the file cannot be written.
        """
        return self._write(self.to_json_string(record), output_path)

    def write_csv(self, record: InvoiceRecord, output_path: Union[str, Path]) -> Path:
        """
        Write a record to a CSV file.

        Returns:
            Path of the written file.

        Raises:
            OutputWriteError: If the file cannot be written.
        """
        return self._write(self.to_csv_string(record), output_path)

    def _write(self, content: str, output_path: Union[str, Path]) -> Path:
        """Write text content, creating parent directories as needed."""
        path = Path(output_path)

        try:
            ensure_directory(path.parent)
            with open(path, 'w', encoding='utf-8', newline='') as f:
                f.write(content)
        except OSError as e:
            raise OutputWriteError(str(path), str(e))

        logger.debug(f"Wrote {path}")
        return path
