"""
Invoice Parser Orchestration Module.

This module ties the pipeline together for files on disk:

    File -> InputHandler (suffix dispatch, decode) -> InvoiceExtractor
         -> InvoiceRecord -> OutputHandler (json / csv / both)

Batch processing isolates each document: a failure is logged and counted
and the remaining files are still processed.

Author: ML Engineering Team
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from invoice_parser.extraction import InvoiceExtractor
from invoice_parser.input_handler import InputHandler
from invoice_parser.models import InvoiceRecord
from invoice_parser.output_handler import OutputHandler
from invoice_parser.postprocessor import InvoiceValidator
from invoice_parser.utils.helpers import ensure_directory, format_amount
from invoice_parser.utils.logger import get_logger

# Initialize module logger
logger = get_logger(__name__)


@dataclass
class BatchSummary:
    """
    Outcome of processing a directory of invoices.

    Attributes:
        successful: Number of files parsed and saved
        failed: Number of files that raised an error
        failures: File name -> error message for each failure
        outputs: Paths written for the successful files
    """
    successful: int = 0
    failed: int = 0
    failures: Dict[str, str] = field(default_factory=dict)
    outputs: List[Path] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Number of files attempted."""
        return self.successful + self.failed

    def record_success(self, paths: List[Path]) -> None:
        self.successful += 1
        self.outputs.extend(paths)

    def record_failure(self, filename: str, error: Exception) -> None:
        self.failed += 1
        self.failures[filename] = str(error)


class InvoiceParser:
    """
    Parses invoice files and saves the extracted records.

    Attributes:
        input_handler: Loads and decodes files
        extractor: Builds records from decoded content
        output_handler: Writes records to disk
        validator: Arithmetic consistency check for reports

    Example:
        >>> parser = InvoiceParser()
        >>> record = parser.parse("invoice.pdf")
        >>> parser.parse_and_save("invoice.csv", "output/invoice", "both")
        >>> summary = parser.parse_directory("invoices/", "output/", "json")
        >>> print(summary.successful, summary.failed)
    """

    # Output file suffix per format ("both" also writes a .csv beside the .json)
    FORMAT_SUFFIXES = {
        'json': '.json',
        'csv': '.csv',
        'both': '.json',
    }

    def __init__(
        self,
        input_handler: Optional[InputHandler] = None,
        extractor: Optional[InvoiceExtractor] = None,
        output_handler: Optional[OutputHandler] = None
    ) -> None:
        self.input_handler = input_handler or InputHandler()
        self.extractor = extractor or InvoiceExtractor()
        self.output_handler = output_handler or OutputHandler()
        self.validator = InvoiceValidator()

    def parse(self, filepath: Union[str, Path]) -> InvoiceRecord:
        """
        Parse one invoice file.

        Args:
            filepath: Path to a .pdf or .csv file.

        Returns:
            Extracted InvoiceRecord.

        Raises:
            InputError: If the file is missing, unsupported, empty or
                unreadable.
        """
        document = self.input_handler.load(filepath)
        record = self.extractor.extract(document.payload, document.source_kind)

        logger.info(
            f"Parsed {document.filename}: invoice {record.invoice_number}, "
            f"{record.item_count} line item(s)"
        )

        report = self.validator.validate(record)
        for message in report.errors + report.warnings:
            logger.debug(f"{document.filename}: {message}")

        return record

    def parse_and_save(
        self,
        input_path: Union[str, Path],
        output_path: Union[str, Path],
        output_format: Optional[str] = None
    ) -> List[Path]:
        """
        Parse one invoice file and write the record.

        The output format is checked before the input is read.

        Returns:
            Paths of the written files.

        Raises:
            UnsupportedOutputFormatError: If the format is unknown.
            InputError: If the input cannot be parsed.
            OutputWriteError: If the output cannot be written.
        """
        output_format = self.output_handler.normalize_format(output_format)
        record = self.parse(input_path)
        return self.output_handler.save(record, output_path, output_format)

    def parse_directory(
        self,
        input_dir: Union[str, Path],
        output_dir: Union[str, Path],
        output_format: Optional[str] = None
    ) -> BatchSummary:
        """
        Parse every supported file in a directory.

        Each output is named after its input file. One file's failure
        does not stop the batch.

        Args:
            input_dir: Directory containing .pdf/.csv invoices.
            output_dir: Directory for outputs (created if missing).
            output_format: 'json', 'csv' or 'both'.

        Returns:
            BatchSummary with success and failure counts.

        Raises:
            UnsupportedOutputFormatError: If the format is unknown.
            InputError: If input_dir is not a directory.
        """
        output_format = self.output_handler.normalize_format(output_format)
        files = self.input_handler.list_documents(input_dir)
        summary = BatchSummary()

        if not files:
            logger.warning(f"No PDF or CSV files found in directory: {input_dir}")
            return summary

        output_dir = ensure_directory(output_dir)
        logger.info(f"Processing {len(files)} files...")

        for filepath in files:
            target = output_dir / (filepath.stem + self.FORMAT_SUFFIXES[output_format])
            try:
                paths = self.parse_and_save(filepath, target, output_format)
                summary.record_success(paths)
                logger.info(f"Successfully processed: {filepath.name}")
            except Exception as e:
                summary.record_failure(filepath.name, e)
                logger.error(f"Failed to process: {filepath.name}: {e}")

        logger.info(f"Batch complete: {summary.successful} successful, {summary.failed} failed")
        return summary

    def format_summary(self, record: InvoiceRecord) -> str:
        """
        Render a human-readable summary of a record.

        Returns:
            Multi-line report including the arithmetic validity flag.
        """
        lines = [
            "=== Extracted Data ===",
            f"Invoice Number: {record.invoice_number}",
            f"Date: {record.invoice_date}",
            f"Vendor: {record.vendor_name}",
            f"Subtotal: ${format_amount(record.subtotal)}",
            f"Tax: ${format_amount(record.tax_amount)}",
            f"Total: ${format_amount(record.total_amount)}",
            f"Line Items: {record.item_count}",
            f"Valid: {'Yes' if self.validator.is_valid(record) else 'No'}",
        ]
        return '\n'.join(lines)
