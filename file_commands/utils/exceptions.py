"""
Custom Exceptions
=================

Error types raised by the collaborators around the command interpreter
(configuration loading, directory scanning, record construction).

The interpreter itself never raises: an unreadable command is reported
through ``CommandResult.action == Action.UNKNOWN`` instead.
"""

from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    """Error codes for programmatic error handling."""

    # General errors (1000-1099)
    UNKNOWN_ERROR = 1000
    CONFIGURATION_ERROR = 1001

    # Collection errors (1100-1199)
    DIRECTORY_NOT_FOUND = 1100
    NOT_A_DIRECTORY = 1101
    SCAN_FAILED = 1102
    INVALID_RECORD = 1103


class FileCommandsError(Exception):
    """Base exception for all file command errors.

    Attributes:
        message: Human-readable error message.
        error_code: Programmatic error code.
        details: Additional error context.
        cause: Original exception that caused this error.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: Optional[dict] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        result = f"[{self.error_code.name}] {self.message}"
        if self.details:
            result += f" | Details: {self.details}"
        if self.cause:
            result += f" | Caused by: {type(self.cause).__name__}: {self.cause}"
        return result

    def to_dict(self) -> dict:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "error_name": self.error_code.name,
            "details": self.details,
            "cause": str(self.cause) if self.cause else None,
        }


class ConfigurationError(FileCommandsError):
    """Raised when a configuration value is missing or out of range.

    Examples:
        - Non-positive recent-file limit
        - Size thresholds that are not positive integers
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        expected_type: Optional[str] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if config_key:
            details["config_key"] = config_key
        if expected_type:
            details["expected_type"] = expected_type
        super().__init__(
            message,
            error_code=ErrorCode.CONFIGURATION_ERROR,
            details=details,
            **kwargs
        )


class ScanError(FileCommandsError):
    """Raised when a directory cannot be turned into a file collection."""

    def __init__(
        self,
        message: str,
        directory: Optional[str] = None,
        error_code: ErrorCode = ErrorCode.SCAN_FAILED,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if directory:
            details["directory"] = directory
        super().__init__(
            message,
            error_code=error_code,
            details=details,
            **kwargs
        )


class InvalidRecordError(FileCommandsError):
    """Raised when a FileRecord is built from inconsistent values."""

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        value: Optional[object] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if field_name:
            details["field"] = field_name
        if value is not None:
            details["value"] = value
        super().__init__(
            message,
            error_code=ErrorCode.INVALID_RECORD,
            details=details,
            **kwargs
        )
