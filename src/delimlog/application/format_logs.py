"""
Format logs use case.

Orchestrates source -> formatter -> transport for a whole stream of
batches.
"""

import logging
from dataclasses import dataclass

from delimlog.application.ports import LogBatchSource, RecordTransport
from delimlog.core.exceptions import IllegalStateError
from delimlog.formatter.record_formatter import RecordFormatter

__all__ = ["FormatLogsUseCase", "FormatStats"]

logger = logging.getLogger(__name__)


@dataclass
class FormatStats:
    """Counts accumulated over one use case run."""
    batches: int = 0
    entries: int = 0
    records: int = 0

    @property
    def dropped(self) -> int:
        return self.entries - self.records

    def to_dict(self) -> dict[str, int]:
        return {
            "batches": self.batches,
            "entries": self.entries,
            "records": self.records,
            "dropped": self.dropped,
        }


class FormatLogsUseCase:
    """
    Use case: Format every batch from a source and hand it to a transport.

    Example:
        source = JsonLinesBatchSource("entries.jsonl", batch_size=500)
        formatter = RecordFormatter().configure(config)
        use_case = FormatLogsUseCase(source, formatter, StreamTransport(sys.stdout))
        stats = use_case.execute()
    """

    def __init__(
        self,
        source: LogBatchSource,
        formatter: RecordFormatter,
        transport: RecordTransport,
    ):
        """
        Initialize the use case.

        Args:
            source: Batch source adapter (file, stdin, etc.)
            formatter: A configured RecordFormatter
            transport: Destination for formatted records
        """
        self.source = source
        self.formatter = formatter
        self.transport = transport

    def execute(self) -> FormatStats:
        """
        Run the pipeline until the source is exhausted.

        The transport is closed when the run ends, successfully or not.

        Returns:
            Counts of batches, entries and records

        Raises:
            IllegalStateError: If the formatter is not configured
        """
        if not self.formatter.is_configured:
            raise IllegalStateError("FormatLogsUseCase requires a configured formatter")

        stats = FormatStats()
        try:
            for batch in self.source.read_batches():
                records = self.formatter.format(batch)
                stats.batches += 1
                stats.entries += len(batch)
                stats.records += len(records)
                if records:
                    self.transport.send(records)
        finally:
            self.transport.close()

        logger.info(
            "Formatting finished: batches=%d entries=%d records=%d dropped=%d",
            stats.batches,
            stats.entries,
            stats.records,
            stats.dropped,
        )
        return stats
