"""
Input and output models for delimlog.

LogEntry and LogBatch arrive from an upstream fetcher; FormattedRecord
is what the formatter hands to a transport.
"""

from dataclasses import dataclass
from typing import Any, Iterator, Mapping

__all__ = [
    "LogEntry",
    "LogBatch",
    "FormattedRecord",
    "TIMESTAMP_HEADER",
    "DESTINATION_HEADER",
]

TIMESTAMP_HEADER = "timestamp"
DESTINATION_HEADER = "destination"


@dataclass(frozen=True)
class LogEntry:
    """
    One source log record: ordered (key, value) pairs plus epoch seconds.

    Keys may repeat; consumers treat the last occurrence as authoritative.
    """
    contents: tuple[tuple[str, str | None], ...] = ()
    time: int = 0

    @classmethod
    def from_mapping(cls, fields: Mapping[str, Any], time: int) -> "LogEntry":
        """
        Build an entry from a mapping of field names to values.

        Non-string values are converted with str(); None is kept as-is.
        """
        contents = tuple(
            (str(key), None if value is None else str(value))
            for key, value in fields.items()
        )
        return cls(contents=contents, time=int(time))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary (later duplicate keys win)."""
        return {"time": self.time, "contents": dict(self.contents)}


@dataclass(frozen=True)
class LogBatch:
    """An ordered group of entries fetched together."""
    entries: tuple[LogEntry, ...] = ()
    source: str | None = None

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class FormattedRecord:
    """
    A delimited line ready for a transport.

    The payload is opaque to everything downstream of the formatter;
    the timestamp and destination travel as headers.
    """
    payload: str
    timestamp: str
    destination: str

    @property
    def headers(self) -> dict[str, str]:
        """Record metadata keyed the way transports expect it."""
        return {
            TIMESTAMP_HEADER: self.timestamp,
            DESTINATION_HEADER: self.destination,
        }

    def encode(self, encoding: str = "utf-8") -> bytes:
        """Return the payload as bytes."""
        return self.payload.encode(encoding)
