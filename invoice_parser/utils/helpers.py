"""
Helper Utilities Module.

This module provides small utility functions shared by the input, output
and CLI layers.

Functions:
    - ensure_directory: Create directory if it doesn't exist
    - get_file_extension: Extract file extension safely
    - format_amount: Render a monetary value with two decimals
"""

from pathlib import Path
from typing import Union


def ensure_directory(path: Union[str, Path]) -> Path:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure exists.

    Returns:
        Path object pointing to the directory.

    Raises:
        PermissionError: If directory cannot be created due to permissions.

    Example:
        >>> ensure_directory("output/invoices")
        PosixPath('output/invoices')
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def get_file_extension(filepath: Union[str, Path]) -> str:
    """
    Extract the file extension from a filepath.

    Returns the extension in lowercase, including the dot.
    Returns empty string if no extension exists.

    Example:
        >>> get_file_extension("invoice.PDF")
        '.pdf'
        >>> get_file_extension("noextension")
        ''
    """
    return Path(filepath).suffix.lower()


def format_amount(value: float) -> str:
    """
    Format a monetary value with exactly two decimal places.

    Example:
        >>> format_amount(1234.5)
        '1234.50'
    """
    return f"{value:.2f}"
