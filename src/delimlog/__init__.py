"""
delimlog - Convert structured log entries into flat delimited records.

One pluggable stage of a log-shipping pipeline: batches of key/value
log entries go in, ordered delimited lines with timestamp and
destination headers come out.

Usage:
    from delimlog import ColumnSchema, FormatterConfig, RecordFormatter, LogEntry

    config = FormatterConfig(
        columns=ColumnSchema.parse("host,level,message"),
        destination="app-logs",
        append_timestamp=True,
        use_record_time=True,
    )
    formatter = RecordFormatter().configure(config)
    records = formatter.format([LogEntry.from_mapping({"host": "web-1"}, time=1000)])

    # Or from flat options, as a pipeline config loader would supply them
    from delimlog import create_formatter
    formatter = create_formatter({"columns": "a,b,c", "destination": "app-logs"})

    # Format a JSON-lines file end to end
    from delimlog import format_file
    stats = format_file("entries.jsonl", {"columns": "a,b", "destination": "app"}, sys.stdout)
"""

__version__ = "0.1.0"

from typing import Any, Mapping, TextIO

from delimlog.core.models import (
    LogEntry,
    LogBatch,
    FormattedRecord,
)
from delimlog.core.exceptions import (
    DelimLogError,
    ConfigurationError,
    ConfigError,
    IllegalStateError,
    EntryDecodeError,
)
from delimlog.domain.entities import ColumnSchema, FormatterConfig
from delimlog.domain.services import Clock, RandomSource
from delimlog.formatter import RecordFormatter, SystemClock, ThreadLocalRandomSource
from delimlog.config import FormatterOption, load_formatter_config
from delimlog.application import FormatLogsUseCase, FormatStats

# Infrastructure adapters
from delimlog.infrastructure import (
    JsonLinesBatchSource,
    StdinBatchSource,
    StreamTransport,
    MemoryTransport,
)

__all__ = [
    # Version
    "__version__",
    # Core models
    "LogEntry",
    "LogBatch",
    "FormattedRecord",
    # Exceptions
    "DelimLogError",
    "ConfigurationError",
    "ConfigError",
    "IllegalStateError",
    "EntryDecodeError",
    # Domain
    "ColumnSchema",
    "FormatterConfig",
    "Clock",
    "RandomSource",
    # Formatter
    "RecordFormatter",
    "SystemClock",
    "ThreadLocalRandomSource",
    # Configuration
    "FormatterOption",
    "load_formatter_config",
    # Application
    "FormatLogsUseCase",
    "FormatStats",
    # Adapters
    "JsonLinesBatchSource",
    "StdinBatchSource",
    "StreamTransport",
    "MemoryTransport",
    # Convenience functions
    "create_formatter",
    "format_file",
]


def create_formatter(
    options: Mapping[str, Any],
    clock: Clock | None = None,
    random_source: RandomSource | None = None,
) -> RecordFormatter:
    """
    Build a configured formatter from flat options.

    Args:
        options: Option key -> value (see FormatterOption)
        clock: Optional wall-clock provider
        random_source: Optional sampling draw provider

    Returns:
        Configured RecordFormatter

    Raises:
        ConfigurationError: If the options are invalid
    """
    config = load_formatter_config(options)
    return RecordFormatter.from_config(config, clock=clock, random_source=random_source)


def format_file(
    file_path: str,
    options: Mapping[str, Any],
    stream: TextIO,
    batch_size: int = 1000,
) -> FormatStats:
    """
    Format a JSON-lines entry file and write records to a text stream.

    Args:
        file_path: Path to the entry file
        options: Formatter options
        stream: Destination for records, one per line
        batch_size: Maximum entries per batch

    Returns:
        FormatStats for the run
    """
    use_case = FormatLogsUseCase(
        source=JsonLinesBatchSource(file_path, batch_size=batch_size),
        formatter=create_formatter(options),
        transport=StreamTransport(stream),
    )
    return use_case.execute()
