# utils/logger.py
# This file is part of Krypto - An arithmetic card puzzle checker
#
# Logging utility for formula parsing and quiz play with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional, Sequence


class LogLevel(Enum):
    """Log levels for Krypto."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class KryptoLogger:
    """Centralized logger for Krypto with structured quiz output."""

    def __init__(self, name: str = "krypto", level: LogLevel = LogLevel.INFO):
        """Initialize the Krypto logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(KryptoFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (parser traces, solver internals)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for quiz play
    def quiz_presented(self, cards: Sequence[int], target: int):
        """Log a quiz as shown to the player."""
        self.info("=== Krypto ===")
        self.info(f"Cards:  {' '.join(str(card) for card in cards)}")
        self.info(f"Target: {target}")

    def answer_judged(self, expression: str, status: str, value: Optional[float]):
        """Log the outcome of judging a submitted expression."""
        value_str = f" = {value:g}" if value is not None else ""
        self.info(f"{expression}{value_str} → {status}")

    def answer_found(self, index: int, display: str):
        """Log one solver answer."""
        self.info(f"  #{index}: {display}")

    def impossibles_found(self, cards: Sequence[int], impossibles: Sequence[int]):
        """Log targets the hand cannot reach."""
        if impossibles:
            self.info(f"{list(cards)} != {sorted(impossibles)}")
        else:
            self.info(f"{list(cards)} reaches every target")


class KryptoFormatter(logging.Formatter):
    """Custom formatter for Krypto logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[KryptoLogger] = None


def get_logger(name: str = "krypto") -> KryptoLogger:
    """Get or create the global Krypto logger instance.

    Args:
        name: Logger name (default: "krypto")

    Returns:
        KryptoLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = KryptoLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
