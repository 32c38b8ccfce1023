"""
Record formatter: structured log entries to flat delimited lines.
"""

import logging
from typing import Iterable

from delimlog.core.exceptions import ConfigurationError, IllegalStateError
from delimlog.core.models import FormattedRecord, LogEntry
from delimlog.core.sanitize import sanitize_field_value
from delimlog.domain.entities import FormatterConfig
from delimlog.domain.services import Clock, RandomSource
from delimlog.formatter.providers import SystemClock, ThreadLocalRandomSource

__all__ = ["RecordFormatter", "DROP_DRAW_BOUND"]

logger = logging.getLogger(__name__)

DROP_DRAW_BOUND = 100


class RecordFormatter:
    """
    Converts batches of log entries into delimited records.

    A formatter starts unconfigured and moves to configured exactly once
    through configure(). format() may then be called any number of
    times; each call works on its own row buffer, so concurrent calls
    on one instance do not interfere.

    Example:
        config = FormatterConfig(
            columns=ColumnSchema.parse("a,b,c"),
            destination="access-log",
        )
        formatter = RecordFormatter().configure(config)
        for record in formatter.format(batch):
            transport.send([record])
    """

    def __init__(
        self,
        clock: Clock | None = None,
        random_source: RandomSource | None = None,
    ):
        """
        Initialize an unconfigured formatter.

        Args:
            clock: Wall-clock provider (default: SystemClock)
            random_source: Sampling draw provider (default: ThreadLocalRandomSource)
        """
        self._clock = clock or SystemClock()
        self._random = random_source or ThreadLocalRandomSource()
        self._config: FormatterConfig | None = None

    @classmethod
    def from_config(
        cls,
        config: FormatterConfig,
        clock: Clock | None = None,
        random_source: RandomSource | None = None,
    ) -> "RecordFormatter":
        """Create and configure a formatter in one step."""
        return cls(clock=clock, random_source=random_source).configure(config)

    @property
    def is_configured(self) -> bool:
        return self._config is not None

    @property
    def config(self) -> FormatterConfig | None:
        return self._config

    def configure(self, config: FormatterConfig) -> "RecordFormatter":
        """
        Store a validated configuration.

        Returns self for chaining.

        Raises:
            ConfigurationError: If config is not a FormatterConfig
        """
        if not isinstance(config, FormatterConfig):
            raise ConfigurationError(
                f"Expected FormatterConfig, got {type(config).__name__}"
            )
        self._config = config
        logger.info(
            "Formatter configured: separator=[%s] width=%d destination=%s",
            config.separator,
            config.width,
            config.destination,
        )
        return self

    def format(self, batch: Iterable[LogEntry]) -> list[FormattedRecord]:
        """
        Format a batch of entries.

        Dropped entries are simply absent from the result; every other
        entry yields one record, in input order.

        Args:
            batch: LogBatch or any iterable of LogEntry

        Returns:
            Formatted records

        Raises:
            IllegalStateError: If called before configure()
        """
        config = self._config
        if config is None:
            raise IllegalStateError("RecordFormatter.format() called before configure()")

        records: list[FormattedRecord] = []
        seen = 0
        for entry in batch:
            seen += 1
            if self._should_drop(config):
                continue
            records.append(self._format_entry(entry, config))

        logger.debug(
            "Formatted batch: entries=%d records=%d dropped=%d",
            seen,
            len(records),
            seen - len(records),
        )
        return records

    def _should_drop(self, config: FormatterConfig) -> bool:
        """Draw independently per entry; drop if the draw falls below the rate."""
        if config.drop_percent <= 0:
            return False
        return self._random.next_int(DROP_DRAW_BOUND) < config.drop_percent

    def _format_entry(self, entry: LogEntry, config: FormatterConfig) -> FormattedRecord:
        row: list[str | None] = [None] * config.width

        for key, value in entry.contents:
            position = config.columns.position(key)
            if position is None:
                continue
            row[position] = sanitize_field_value(value)

        local_time = str(self._clock.now_millis())
        if config.use_record_time:
            timestamp = str(int(entry.time) * 1000)
        else:
            timestamp = local_time

        # Timestamp first, then local time, so a shared slot ends up with local time.
        if config.append_timestamp:
            row[config.width - 1] = timestamp
        if config.append_local_time:
            row[config.local_time_position] = local_time

        payload = config.separator.join(
            "" if field is None else field for field in row
        ) + config.line_end

        return FormattedRecord(
            payload=payload,
            timestamp=timestamp,
            destination=config.destination,
        )
