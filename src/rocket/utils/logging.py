"""
Logging configuration for Rocket.

Library modules only obtain loggers; handlers are installed by the CLI through
setup_logging().
"""

import logging
import sys
import traceback
from pathlib import Path

from rich.logging import RichHandler


class FileFormatter(logging.Formatter):
    """Formatter for file logs - clean and parseable."""

    def __init__(self) -> None:
        super().__init__(fmt="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with full exception info for errors."""
        result = super().format(record)

        if record.exc_info:
            result += "\n" + "".join(traceback.format_exception(*record.exc_info))

        return result


class ConsoleFormatter(logging.Formatter):
    """Plain console format: "level: timestamp - msg"."""

    def __init__(self) -> None:
        super().__init__(datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        return f"{record.levelname}: {self.formatTime(record)} - {record.getMessage()}"


# Map string level names to logging constants
LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _parse_level(level: str | int) -> int:
    """
    Parse logging level from string or int.

    Args:
        level: Logging level as string (DEBUG, INFO, etc.) or int

    Returns:
        Logging level constant
    """
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level_upper = level.upper()
        if level_upper in LEVEL_MAP:
            return LEVEL_MAP[level_upper]
    # Default to INFO if invalid
    return logging.INFO


def setup_logging(
    level: str | int = logging.INFO,
    log_file: str | Path | None = None,
    use_rich: bool = True,
) -> logging.Logger:
    """
    Setup logging configuration for Rocket.

    Args:
        level: Logging level as string (DEBUG, INFO, etc.) or int (default: INFO)
        log_file: Optional file path to write logs to (default: None, console only)
        use_rich: Whether to use RichHandler for console output (default: True)

    Returns:
        Logger instance
    """
    logger = logging.getLogger("rocket")

    # Only clear handlers from this specific logger, not root or child loggers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    level_int = _parse_level(level)
    logger.setLevel(level_int)

    console_handler: logging.Handler
    if use_rich:
        console_handler = RichHandler(
            level=level_int,
            show_time=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
            log_time_format="[%X]",
        )
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level_int)
        console_handler.setFormatter(ConsoleFormatter())
    logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode="a")
        # The logger level still filters; the file captures everything it lets through
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(FileFormatter())
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "rocket") -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (default: "rocket")

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    # Child loggers (e.g. "rocket.config.predefined") reach handlers on "rocket"
    logger.propagate = True
    return logger
