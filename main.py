#!/usr/bin/env python3
"""
Invoice Parser - Main Entry Point.

This is the command-line interface for extracting structured data from
invoice PDFs and CSV files.

Usage:
    Command Line:
        python main.py --input invoice.pdf --output result.json
        python main.py -i invoice.pdf -o result -f both
        python main.py -i invoices/ -o results/ -f json
        python main.py -i invoice.pdf -o result.json -v

    Python:
        from main import run_extraction
        record = run_extraction("invoice.pdf", "result.json")

Author: ML Engineering Team
Version: 1.0.0
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Union

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import ConfigurationManager
from invoice_parser.utils.logger import setup_logger_from_config, get_logger, set_level
from invoice_parser.utils.exceptions import InvoiceParserError


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:]).

    Returns:
        Parsed argument namespace.
    """
    parser = argparse.ArgumentParser(
        description="Invoice Parser - Extract structured data from invoice PDFs and CSV files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    Parse single PDF to JSON:
        python main.py --input invoice.pdf --output result.json

    Parse single file to both JSON and CSV:
        python main.py -i invoice.pdf -o result -f both

    Parse all files in directory:
        python main.py -i invoices/ -o results/ -f json

    Parse with verbose output:
        python main.py -i invoice.pdf -o result.json -v
        """
    )

    parser.add_argument(
        "--input", "-i",
        type=str,
        required=True,
        help="Input file or directory (required)"
    )

    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Output file or directory (default: 'output')"
    )

    parser.add_argument(
        "--format", "-f",
        type=str,
        default=None,
        help="Output format: json, csv, or both (default: json)"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print extracted data to console"
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Path to custom configuration file"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log warnings and errors"
    )

    return parser.parse_args(argv)


def initialize_system(args: argparse.Namespace) -> ConfigurationManager:
    """
    Initialize the parser with configuration and logging.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Initialized configuration manager.
    """
    config = ConfigurationManager(args.config)
    setup_logger_from_config()

    if args.debug:
        set_level(logging.DEBUG)
    elif args.quiet:
        set_level(logging.WARNING)

    logger = get_logger(__name__)
    logger.debug(f"Settings: {config.config_path}")
    logger.debug(f"Version: {config.get('project.version', '1.0.0')}")
    logger.debug(f"Input: {args.input}")
    logger.debug(f"Output: {args.output}")

    return config


def run_extraction(
    input_path: Union[str, Path],
    output_path: Optional[Union[str, Path]] = None,
    output_format: Optional[str] = None,
    verbose: bool = False
):
    """
    Run the invoice parser on a file or directory.

    This is the main programmatic entry point. A directory runs batch
    mode; a file runs single mode.

    Args:
        input_path: Path to input file or directory.
        output_path: Output file (single) or directory (batch).
        output_format: 'json', 'csv' or 'both'.
        verbose: Print the extracted data of a single file.

    Returns:
        InvoiceRecord for a file, BatchSummary for a directory.

    Raises:
        InvoiceParserError: On unsupported formats or unreadable input.
    """
    from config import get_config
    from invoice_parser.parser import InvoiceParser

    logger = get_logger(__name__)
    parser = InvoiceParser()

    input_p = Path(input_path)
    output_p = Path(output_path or get_config("output.default_path", "output"))

    if input_p.is_dir():
        logger.info(f"Processing directory: {input_p.absolute()}")
        summary = parser.parse_directory(input_p, output_p, output_format)

        print("\n=== Summary ===")
        print(f"Successful: {summary.successful}")
        print(f"Failed: {summary.failed}")
        return summary

    logger.info(f"Processing file: {input_p.absolute()}")
    output_format = parser.output_handler.normalize_format(output_format)
    record = parser.parse(input_p)

    if verbose:
        print()
        print(parser.format_summary(record))
        print()

    written = parser.output_handler.save(record, output_p, output_format)
    for path in written:
        logger.info(f"Successfully saved to: {path.absolute()}")

    return record


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function - entry point for command-line execution.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        args = parse_arguments(argv)
        initialize_system(args)

        result = run_extraction(
            input_path=args.input,
            output_path=args.output,
            output_format=args.format,
            verbose=args.verbose
        )

        if getattr(result, 'failed', 0):
            return 1
        return 0

    except InvoiceParserError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return 130

    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        if "--debug" in (argv if argv is not None else sys.argv):
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
