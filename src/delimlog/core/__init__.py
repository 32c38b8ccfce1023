"""
Core data models and exceptions for delimlog.
"""

from delimlog.core.models import (
    LogEntry,
    LogBatch,
    FormattedRecord,
    TIMESTAMP_HEADER,
    DESTINATION_HEADER,
)
from delimlog.core.exceptions import (
    DelimLogError,
    ConfigurationError,
    ConfigError,
    IllegalStateError,
    EntryDecodeError,
)
from delimlog.core.sanitize import LINE_BREAK, sanitize_field_value

__all__ = [
    "LogEntry",
    "LogBatch",
    "FormattedRecord",
    "TIMESTAMP_HEADER",
    "DESTINATION_HEADER",
    "DelimLogError",
    "ConfigurationError",
    "ConfigError",
    "IllegalStateError",
    "EntryDecodeError",
    "LINE_BREAK",
    "sanitize_field_value",
]
