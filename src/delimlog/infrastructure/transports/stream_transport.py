"""
Transport adapters for delimlog.

Transports deliver formatted records without looking inside the
payload.
"""

from typing import Iterable, TextIO

from delimlog.core.models import FormattedRecord

__all__ = ["StreamTransport", "MemoryTransport"]


class StreamTransport:
    """
    Writes each record's payload to a text stream.

    The payload already ends with the configured line end; the
    terminator is written after it. Pass terminator="" when the line
    end alone should separate records.

    Example:
        transport = StreamTransport(sys.stdout)
        transport.send(records)
    """

    def __init__(self, stream: TextIO, terminator: str = "\n", close_stream: bool = False):
        """
        Initialize stream transport.

        Args:
            stream: Destination text stream
            terminator: Written after every payload
            close_stream: Close the stream on close() (for owned files)
        """
        self.stream = stream
        self.terminator = terminator
        self.close_stream = close_stream
        self.sent = 0

    def send(self, records: Iterable[FormattedRecord]) -> None:
        for record in records:
            self.stream.write(record.payload)
            self.stream.write(self.terminator)
            self.sent += 1

    def close(self) -> None:
        self.stream.flush()
        if self.close_stream:
            self.stream.close()


class MemoryTransport:
    """Collects records in memory, in delivery order."""

    def __init__(self):
        self.records: list[FormattedRecord] = []
        self.closed = False

    def send(self, records: Iterable[FormattedRecord]) -> None:
        self.records.extend(records)

    def close(self) -> None:
        self.closed = True

    @property
    def payloads(self) -> list[str]:
        return [record.payload for record in self.records]

    @property
    def headers(self) -> list[dict[str, str]]:
        return [record.headers for record in self.records]
