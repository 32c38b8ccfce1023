"""
Port interfaces for the application layer.

These are the interfaces that infrastructure adapters must implement.
They define the contract between the formatting use case and the
surrounding pipeline.
"""

from typing import Iterable, Iterator, Protocol, runtime_checkable

from delimlog.core.models import FormattedRecord, LogBatch

__all__ = [
    "LogBatchSource",
    "RecordTransport",
]


@runtime_checkable
class LogBatchSource(Protocol):
    """
    Port for upstream batch fetchers.

    Implementations provide batches of log entries from files, stdin,
    or a remote log service.
    """

    def read_batches(self) -> Iterator[LogBatch]:
        """Yield batches in arrival order."""
        ...

    def metadata(self) -> dict[str, str]:
        """Get source metadata (path, type, counts, etc.)."""
        ...


@runtime_checkable
class RecordTransport(Protocol):
    """
    Port for downstream delivery.

    Transports accept formatted records in order and deliver them
    without interpreting the payload.
    """

    def send(self, records: Iterable[FormattedRecord]) -> None:
        """Deliver records in order."""
        ...

    def close(self) -> None:
        """Flush and release resources."""
        ...
