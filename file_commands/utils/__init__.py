"""Utilities module for Smart File Commands."""

from .logging_config import setup_logging, get_logger, LoggingConfig, Timer
from .exceptions import (
    ErrorCode,
    FileCommandsError,
    ConfigurationError,
    ScanError,
    InvalidRecordError,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "LoggingConfig",
    "Timer",
    "ErrorCode",
    "FileCommandsError",
    "ConfigurationError",
    "ScanError",
    "InvalidRecordError",
]
