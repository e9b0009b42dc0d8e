"""
Main Input Handler Module.

This module provides the InputHandler class that turns an invoice file
into the raw content consumed by the extraction engine. The file type is
decided purely by suffix (.pdf or .csv, case-insensitive), never by
content sniffing.

Usage:
    from invoice_parser.input_handler import InputHandler

    handler = InputHandler()
    document = handler.load("invoice.pdf")

    # Batch discovery
    paths = handler.list_documents("./invoices/")

Classes:
    InputDocument: Decoded content of one file
    InputHandler: Main class for file input handling
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Union, List, Optional, Sequence

from config import get_config
from invoice_parser.extraction import SourceKind
from invoice_parser.utils.logger import get_logger
from invoice_parser.utils.helpers import get_file_extension
from invoice_parser.utils.exceptions import (
    InputError,
    UnsupportedFileTypeError,
    DocumentNotFoundError,
    EmptyDocumentError
)

from .pdf_processor import PDFProcessor
from .csv_processor import CSVProcessor


# Initialize module logger
logger = get_logger(__name__)


@dataclass
class InputDocument:
    """
    Decoded content of one invoice file.

    Attributes:
        filepath: Original file path
        filename: Original filename
        source_kind: PDF_TEXT or CSV_ROWS
        payload: Text blob (PDF) or list of rows (CSV)
    """
    filepath: str
    filename: str
    source_kind: SourceKind
    payload: Union[str, List[List[str]]]

    def __repr__(self) -> str:
        return (
            f"InputDocument(filename='{self.filename}', "
            f"kind='{self.source_kind.value}')"
        )


class InputHandler:
    """
    Main input handler for invoice files.

    Attributes:
        supported_extensions: Set of supported file extensions
        pdf_processor: PDFProcessor instance for PDF files
        csv_processor: CSVProcessor instance for CSV files

    Example:
        >>> handler = InputHandler()
        >>> document = handler.load("invoice.csv")
        >>> document.source_kind
        <SourceKind.CSV_ROWS: 'csv'>
    """

    # Suffix -> engine input shape
    EXTENSION_KINDS = {
        '.pdf': SourceKind.PDF_TEXT,
        '.csv': SourceKind.CSV_ROWS,
    }

    def __init__(
        self,
        pdf_processor: Optional[PDFProcessor] = None,
        csv_processor: Optional[CSVProcessor] = None
    ) -> None:
        """
        Initialize the InputHandler.

        Args:
            pdf_processor: Optional PDF processor override.
            csv_processor: Optional CSV processor override.
        """
        configured = get_config(
            "input.supported_extensions",
            list(self.EXTENSION_KINDS)
        )
        # Only suffixes with an extraction strategy can be enabled
        self.supported_extensions = {
            ext.lower() for ext in configured
            if ext.lower() in self.EXTENSION_KINDS
        }

        self.pdf_processor = pdf_processor or PDFProcessor()
        self.csv_processor = csv_processor or CSVProcessor()

        logger.debug(f"InputHandler initialized with extensions: {sorted(self.supported_extensions)}")

    def detect_source_kind(self, filepath: Union[str, Path]) -> SourceKind:
        """
        Detect the extraction strategy for a file from its suffix.

        Args:
            filepath: Path to the file.

        Returns:
            SourceKind for the file.

        Raises:
            UnsupportedFileTypeError: If the suffix is not supported.
        """
        extension = get_file_extension(filepath)

        if extension not in self.supported_extensions:
            raise UnsupportedFileTypeError(
                extension or Path(filepath).name,
                sorted(self.supported_extensions)
            )
        return self.EXTENSION_KINDS[extension]

    def validate_file(self, filepath: Union[str, Path]) -> Path:
        """
        Validate that a file exists and is accessible.

        Args:
            filepath: Path to the file to validate.

        Returns:
            Path object pointing to the validated file.

        Raises:
            DocumentNotFoundError: If file doesn't exist.
            InputError: If the path is not a regular file.
            EmptyDocumentError: If the file has zero bytes.
        """
        path = Path(filepath)

        if not path.exists():
            raise DocumentNotFoundError(str(path.absolute()))

        if not path.is_file():
            raise InputError(f"Path is not a file: {filepath}")

        if path.stat().st_size == 0:
            raise EmptyDocumentError(str(filepath))

        return path

    def load(self, filepath: Union[str, Path]) -> InputDocument:
        """
        Load an invoice file and decode it for extraction.

        Args:
            filepath: Path to the invoice file.

        Returns:
            InputDocument holding text (PDF) or rows (CSV).

        Raises:
            InputError: If the file is missing, unsupported, empty or
                unreadable. The failure concerns this document only.
        """
        path = self.validate_file(filepath)
        source_kind = self.detect_source_kind(path)

        if source_kind is SourceKind.PDF_TEXT:
            payload = self.pdf_processor.extract_text(path)
        else:
            payload = self.csv_processor.read_rows(path)

        logger.debug(f"Loaded {path.name} as {source_kind.value}")
        return InputDocument(
            filepath=str(path),
            filename=path.name,
            source_kind=source_kind,
            payload=payload
        )

    def is_supported(self, filepath: Union[str, Path]) -> bool:
        """Check whether a file has a supported suffix."""
        return get_file_extension(filepath) in self.supported_extensions

    def list_documents(self, directory: Union[str, Path]) -> List[Path]:
        """
        List supported invoice files directly inside a directory.

        Args:
            directory: Directory to scan (not recursive).

        Returns:
            Sorted list of supported file paths.

        Raises:
            DocumentNotFoundError: If the directory doesn't exist.
            InputError: If the path is not a directory.
        """
        directory = Path(directory)

        if not directory.exists():
            raise DocumentNotFoundError(str(directory))

        if not directory.is_dir():
            raise InputError(f"Input path is not a directory: {directory}")

        files = sorted(
            path for path in directory.iterdir()
            if path.is_file() and self.is_supported(path)
        )

        logger.info(f"Found {len(files)} files to process in {directory}")
        return files
