"""
PDF Processor Module.

This module decodes a PDF invoice into the single text blob consumed by
the extraction engine. Uses pdfplumber for digital PDF text extraction.

Author: ML Engineering Team
"""

from pathlib import Path
from typing import Union, Optional

import pdfplumber

from config import get_config
from invoice_parser.utils.logger import get_logger
from invoice_parser.utils.exceptions import CorruptedFileError, EmptyDocumentError

# Initialize module logger
logger = get_logger(__name__)


class PDFProcessor:
    """
    Processor for PDF files.

    Extracts the text of every page and joins pages with newlines. Scanned
    (image-only) PDFs yield no text and are reported as empty, since OCR
    is out of scope.

    Attributes:
        max_pages: Maximum number of pages to read (None for all)

    Example:
        >>> processor = PDFProcessor()
        >>> text = processor.extract_text("invoice.pdf")
        >>> print(text.splitlines()[0])
    """

    def __init__(self, max_pages: Optional[int] = None) -> None:
        """
        Initialize the PDF processor.

        Args:
            max_pages: Page limit. If None, uses config (default: all pages).
        """
        self.max_pages = max_pages if max_pages is not None else \
            get_config("input.pdf.max_pages")
        logger.debug(f"PDFProcessor initialized (max_pages={self.max_pages})")

    def extract_text(self, filepath: Union[str, Path]) -> str:
        """
        Extract the text of a PDF file.

        Args:
            filepath: Path to the PDF file.

        Returns:
            Newline-joined text of the processed pages.

        Raises:
            CorruptedFileError: If the PDF cannot be opened or read.
            EmptyDocumentError: If the PDF contains no extractable text.
        """
        filepath = Path(filepath)
        logger.debug(f"Extracting text from PDF: {filepath.name}")

        try:
            with pdfplumber.open(filepath) as pdf:
                pages = pdf.pages
                if self.max_pages:
                    pages = pages[:self.max_pages]
                page_texts = [page.extract_text() or "" for page in pages]
        except Exception as e:
            logger.error(f"PDF text extraction failed: {e}")
            raise CorruptedFileError(str(filepath), str(e))

        text = '\n'.join(page_texts)

        if not text.strip():
            raise EmptyDocumentError(str(filepath))

        logger.debug(f"Extracted {len(text)} characters from {len(page_texts)} page(s)")
        return text
