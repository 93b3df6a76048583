"""
Logging configuration with colored output and better formatting.
"""

import logging
import sys
from typing import Optional, Union


class ColoredFormatter(logging.Formatter):
    """Custom formatter to add colors to log levels."""

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[34m",  # Blue
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",
    }

    MODULE_DISPLAY_NAMES = {
        "__main__": "🚀 MAIN",
        "cli": "🚀 CLI",
        "rest_client": "🌐 REST",
        "manager": "🧵 TASKS",
        "base": "🧵 TASKS",
        "rest_tasks": "🧵 TASKS",
        "dialogs": "💬 DIALOG",
        "rest_requests": "📦 REQUESTS",
        "config": "⚙️  CONFIG",
        "retry_decorator": "🔁 RETRY",
    }

    def format(self, record):
        # Work on a copy so other handlers see the original record
        record = logging.makeLogRecord(record.__dict__)
        record.name = self._get_module_display_name(record.name)

        if record.levelname in self.COLORS:
            record.levelname = f"{self.COLORS[record.levelname]}{record.levelname}{self.COLORS['RESET']}"

        return super().format(record)

    def _get_module_display_name(self, name: str) -> str:
        """Convert module names to more descriptive display names."""
        short_name = name.split(".")[-1]
        if short_name in self.MODULE_DISPLAY_NAMES:
            return self.MODULE_DISPLAY_NAMES[short_name]
        return f"📦 {short_name.upper()}"


def setup_logging(
    level: Union[int, str] = logging.INFO,
    format_string: Optional[str] = None,
    use_colors: bool = True,
) -> None:
    """
    Set up logging with colors and better formatting.

    Args:
        level: Logging level (e.g., logging.INFO, "DEBUG")
        format_string: Custom format string (optional)
        use_colors: Whether to use colored output
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    if format_string is None:
        format_string = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"

    if use_colors:
        formatter = ColoredFormatter(format_string, datefmt="%H:%M:%S")
    else:
        formatter = logging.Formatter(format_string, datefmt="%H:%M:%S")

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Suppress noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the specified name.

    Args:
        name: Module name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def log_section_header(logger: logging.Logger, title: str, char: str = "=") -> None:
    """
    Log a formatted section header for better visual separation.

    Args:
        logger: Logger instance
        title: Section title
        char: Character to use for the border
    """
    border = char * 60
    logger.info(border)
    logger.info(f"{title.center(60)}")
    logger.info(border)


def log_key_value(logger: logging.Logger, key: str, value: str, level: int = logging.INFO) -> None:
    """Log a key-value pair in a consistent format."""
    logger.log(level, f"{key}: {value}")


def log_list_items(logger: logging.Logger, title: str, items: list, level: int = logging.INFO) -> None:
    """
    Log a list of items in a formatted way.

    Args:
        logger: Logger instance
        title: List title
        items: List of items to log
        level: Log level
    """
    logger.log(level, f"{title}:")
    for item in items:
        logger.log(level, f"  • {item}")
