"""
Custom exceptions for delimlog.
"""

__all__ = [
    "DelimLogError",
    "ConfigurationError",
    "ConfigError",
    "IllegalStateError",
    "EntryDecodeError",
]


class DelimLogError(Exception):
    """Base exception for all delimlog errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ConfigurationError(DelimLogError):
    """Raised when formatter configuration is invalid. Never retried."""

    def __init__(self, message: str, config_key: str | None = None):
        details = {}
        if config_key is not None:
            details["config_key"] = config_key
        super().__init__(message, details)
        self.config_key = config_key


ConfigError = ConfigurationError


class IllegalStateError(DelimLogError):
    """Raised when a formatter is used before it has been configured."""


class EntryDecodeError(DelimLogError):
    """Raised by a batch source when an input line cannot be decoded."""

    def __init__(
        self,
        message: str,
        line: str | None = None,
        line_number: int | None = None,
    ):
        details = {}
        if line is not None:
            details["line"] = line[:100] + "..." if len(line) > 100 else line
        if line_number is not None:
            details["line_number"] = line_number
        super().__init__(message, details)
        self.line = line
        self.line_number = line_number
