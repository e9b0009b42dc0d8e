"""
Logging Configuration Module.

All invoice parser loggers hang off one application logger,
"invoice_parser". setup_logger() attaches a coloured console handler and,
optionally, a rotating log file to it; modules only ever call get_logger().

Usage:
    from invoice_parser.utils.logger import setup_logger_from_config, get_logger

    setup_logger_from_config()          # once, in main.py
    logger = get_logger(__name__)       # in any module
    logger.debug("No match for invoice_date")
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, Union

import colorama
from colorama import Fore, Style

colorama.init()

# Application logger namespace
ROOT_LOGGER_NAME = "invoice_parser"

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ColoredFormatter(logging.Formatter):
    """
    Console formatter that tints each line by severity.

    DEBUG is cyan, INFO green, WARNING yellow, ERROR red and CRITICAL
    bright red. Levels without a colour are left untouched.
    """

    COLORS = {
        logging.DEBUG: Fore.CYAN,
        logging.INFO: Fore.GREEN,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Fore.RED + Style.BRIGHT,
    }
    RESET = Style.RESET_ALL

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        color = self.COLORS.get(record.levelno)
        if color is None:
            return line
        return f"{color}{line}{self.RESET}"


def resolve_level(level: Union[str, int]) -> int:
    """
    Convert a level name such as "debug" to its numeric value.

    Raises:
        ValueError: If the name is not a standard logging level.
    """
    if isinstance(level, int):
        return level

    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown logging level: {level}")
    return numeric


def setup_logger(
    level: Union[str, int] = "INFO",
    log_format: Optional[str] = None,
    date_format: Optional[str] = None,
    log_file: Optional[str] = None,
    max_bytes: int = 10485760,  # 10 MB
    backup_count: int = 5,
    colorize: bool = True
) -> logging.Logger:
    """
    Configure the application logger.

    Existing handlers are replaced, so calling this twice does not
    duplicate output. The logger does not propagate to the root logger.

    Args:
        level: Level name or number for the logger and its handlers.
        log_format: Record format. Defaults to DEFAULT_FORMAT.
        date_format: Timestamp format. Defaults to DEFAULT_DATE_FORMAT.
        log_file: Optional log file path; enables a RotatingFileHandler.
        max_bytes: File size that triggers rotation.
        backup_count: Rotated files kept.
        colorize: Colour console lines by severity.

    Returns:
        The "invoice_parser" logger.

    Example:
        >>> setup_logger(level="DEBUG", log_file="logs/invoice_parser.log")
    """
    numeric_level = resolve_level(level)
    log_format = log_format or DEFAULT_FORMAT
    date_format = date_format or DEFAULT_DATE_FORMAT

    app_logger = logging.getLogger(ROOT_LOGGER_NAME)
    app_logger.setLevel(numeric_level)
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()

    formatter_class = ColoredFormatter if colorize else logging.Formatter
    console = logging.StreamHandler(sys.stdout)
    console.setLevel(numeric_level)
    console.setFormatter(formatter_class(log_format, datefmt=date_format))
    app_logger.addHandler(console)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        rotating = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        rotating.setLevel(numeric_level)
        rotating.setFormatter(logging.Formatter(log_format, datefmt=date_format))
        app_logger.addHandler(rotating)

    app_logger.propagate = False
    app_logger.debug(f"Logging initialized at {logging.getLevelName(numeric_level)}")
    return app_logger


def set_level(level: Union[str, int]) -> None:
    """Change the level of the application logger and all its handlers."""
    numeric_level = resolve_level(level)
    app_logger = logging.getLogger(ROOT_LOGGER_NAME)
    app_logger.setLevel(numeric_level)
    for handler in app_logger.handlers:
        handler.setLevel(numeric_level)


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger under the application namespace.

    Example:
        >>> get_logger("invoice_parser.parser").name
        'invoice_parser.parser'
        >>> get_logger("scripts").name
        'invoice_parser.scripts'
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger_from_config() -> logging.Logger:
    """
    Configure logging from the "logging" section of the settings.

    An unusable level name falls back to INFO with a warning on stderr.

    Returns:
        The "invoice_parser" logger.
    """
    from config import ConfigurationManager

    settings = ConfigurationManager().section("logging")
    file_settings = settings.get("file") or {}
    console_settings = settings.get("console") or {}

    options = dict(
        log_format=settings.get("format"),
        date_format=settings.get("date_format"),
        log_file=file_settings.get("path") if file_settings.get("enabled") else None,
        max_bytes=file_settings.get("max_bytes", 10485760),
        backup_count=file_settings.get("backup_count", 5),
        colorize=console_settings.get("colorize", True),
    )

    try:
        return setup_logger(level=settings.get("level", "INFO"), **options)
    except ValueError as e:
        print(f"Warning: {e}; using INFO", file=sys.stderr)
        return setup_logger(level="INFO", **options)
