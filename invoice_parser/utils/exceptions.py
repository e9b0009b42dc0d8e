"""
Custom Exceptions Module.

This module defines the exceptions raised at the boundaries of the invoice
parser. The extraction engine itself never raises for missing fields or
malformed rows; these exceptions cover whole-document and configuration
failures only.

Exception Hierarchy:
    InvoiceParserError (base)
    ├── InputError
    │   ├── UnsupportedFileTypeError
    │   ├── DocumentNotFoundError
    │   ├── CorruptedFileError
    │   └── EmptyDocumentError
    └── OutputError
        ├── UnsupportedOutputFormatError
        └── OutputWriteError
"""


class InvoiceParserError(Exception):
    """
    Base exception for all invoice parser errors.

    Attributes:
        message: Human-readable error message.
        details: Optional dictionary with additional error details.
    """

    def __init__(self, message: str, details: dict = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# INPUT ERRORS
# =============================================================================

class InputError(InvoiceParserError):
    """Base exception for input handling errors."""
    pass


class UnsupportedFileTypeError(InputError):
    """
    Raised when an input file has a suffix other than the supported ones.

    Example:
        >>> raise UnsupportedFileTypeError(".docx", [".pdf", ".csv"])
    """

    def __init__(self, file_type: str, supported_types: list):
        message = (
            f"Unsupported file format: '{file_type}'. "
            f"Only PDF and CSV are supported."
        )
        details = {"file_type": file_type, "supported_types": supported_types}
        super().__init__(message, details)


class DocumentNotFoundError(InputError):
    """Raised when an input file or directory cannot be found."""

    def __init__(self, filepath: str):
        message = f"File not found: {filepath}"
        details = {"filepath": filepath}
        super().__init__(message, details)


class CorruptedFileError(InputError):
    """Raised when a file appears to be corrupted or unreadable."""

    def __init__(self, filepath: str, reason: str = None):
        message = f"Corrupted or unreadable file: {filepath}"
        details = {"filepath": filepath, "reason": reason}
        super().__init__(message, details)


class EmptyDocumentError(InputError):
    """Raised when a document yields no text or no rows at all."""

    def __init__(self, filepath: str):
        message = f"Document is empty: {filepath}"
        details = {"filepath": filepath}
        super().__init__(message, details)


# =============================================================================
# OUTPUT ERRORS
# =============================================================================

class OutputError(InvoiceParserError):
    """Base exception for output handling errors."""
    pass


class UnsupportedOutputFormatError(OutputError):
    """Raised when an output format other than json, csv or both is requested."""

    def __init__(self, output_format: str, supported_formats: list):
        message = (
            f"Unsupported output format: {output_format}. "
            f"Use 'json', 'csv', or 'both'."
        )
        details = {"format": output_format, "supported_formats": supported_formats}
        super().__init__(message, details)


class OutputWriteError(OutputError):
    """Raised when an output file cannot be written."""

    def __init__(self, filepath: str, reason: str = None):
        message = f"Failed to write output file: {filepath}"
        details = {"filepath": filepath, "reason": reason}
        super().__init__(message, details)


__all__ = [
    'InvoiceParserError',
    'InputError',
    'UnsupportedFileTypeError',
    'DocumentNotFoundError',
    'CorruptedFileError',
    'EmptyDocumentError',
    'OutputError',
    'UnsupportedOutputFormatError',
    'OutputWriteError',
]
