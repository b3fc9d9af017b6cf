# utils/__init__.py
# This file is part of Krypto - An arithmetic card puzzle checker
#
# Utility module exports

from .logger import (
    LogLevel,
    KryptoLogger,
    get_logger,
    set_log_level,
    configure_logging,
)

__all__ = [
    "LogLevel",
    "KryptoLogger",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
