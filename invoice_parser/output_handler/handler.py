"""
Main Output Handler Module.

This module provides the OutputHandler class that routes a record to the
requested output format: json, csv, or both.

Author: ML Engineering Team
"""

from pathlib import Path
from typing import List, Optional, Tuple, Union

from config import get_config
from invoice_parser.models import InvoiceRecord
from invoice_parser.utils.logger import get_logger
from invoice_parser.utils.exceptions import UnsupportedOutputFormatError
from .formatter import OutputFormatter

# Initialize module logger
logger = get_logger(__name__)


class OutputHandler:
    """
    Unified output handler for invoice records.

    Attributes:
        formatter: OutputFormatter used for serialization
        default_format: Format used when none is given

    Example:
        >>> handler = OutputHandler()
        >>> handler.save(record, "output/invoice.json", "json")
        [PosixPath('output/invoice.json')]
        >>> handler.save(record, "output/invoice", "both")
        [PosixPath('output/invoice.json'), PosixPath('output/invoice.csv')]
    """

    SUPPORTED_FORMATS = ('json', 'csv', 'both')

    def __init__(self, formatter: Optional[OutputFormatter] = None) -> None:
        """
        Initialize the output handler.

        Args:
            formatter: Optional formatter override.
        """
        self.formatter = formatter or OutputFormatter()
        self.default_format = get_config("output.default_format", "json")

    def normalize_format(self, output_format: Optional[str]) -> str:
        """
        Lower-case and check an output format name.

        Raises:
            UnsupportedOutputFormatError: If the format is unknown.
        """
        output_format = (output_format or self.default_format).lower()
        if output_format not in self.SUPPORTED_FORMATS:
            raise UnsupportedOutputFormatError(output_format, list(self.SUPPORTED_FORMATS))
        return output_format

    def output_paths(
        self,
        output_path: Union[str, Path],
        output_format: Optional[str] = None
    ) -> List[Tuple[Path, str]]:
        """
        Resolve the files a save will write, with the format of each.

        For "both", the suffix of output_path is replaced by .json and
        .csv. Single formats write exactly output_path.
        """
        output_format = self.normalize_format(output_format)
        path = Path(output_path)

        if output_format == 'both':
            return [(path.with_suffix('.json'), 'json'), (path.with_suffix('.csv'), 'csv')]
        return [(path, output_format)]

    def save(
        self,
        record: InvoiceRecord,
        output_path: Union[str, Path],
        output_format: Optional[str] = None
    ) -> List[Path]:
        """
        Save a record in the requested format.

        Args:
            record: Record to write.
            output_path: Target file (base name for "both").
            output_format: 'json', 'csv' or 'both'. Defaults to config.

        Returns:
            Paths of the written files.

        Raises:
            UnsupportedOutputFormatError: If the format is unknown.
            OutputWriteError: If a file cannot be written.
        """
        writers = {
            'json': self.formatter.write_json,
            'csv': self.formatter.write_csv,
        }

        written = [
            writers[file_format](record, path)
            for path, file_format in self.output_paths(output_path, output_format)
        ]

        logger.debug(f"Saved {record.invoice_number} to {', '.join(str(p) for p in written)}")
        return written
