"""
Stdin batch source for delimlog.

Provides streaming input from standard input for piped entries.
"""

import sys
from typing import Iterator, TextIO

from delimlog.core.models import LogBatch
from delimlog.infrastructure.sources.decoding import DEFAULT_BATCH_SIZE, batch_lines

__all__ = ["StdinBatchSource"]


class StdinBatchSource:
    """
    Streaming batch source for stdin.

    Example:
        # cat entries.jsonl | delimlog format --columns a,b --destination d
        source = StdinBatchSource(batch_size=100)
        for batch in source.read_batches():
            process(batch)
    """

    def __init__(
        self,
        batch_size: int = DEFAULT_BATCH_SIZE,
        stream: TextIO | None = None,
    ):
        """
        Initialize stdin batch source.

        Args:
            batch_size: Maximum entries per batch
            stream: Text stream to read instead of sys.stdin
        """
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive: {batch_size}")
        self.batch_size = batch_size
        self._stream = stream
        self._line_count = 0
        self._batch_count = 0

    def _read_lines(self) -> Iterator[str]:
        stream = self._stream if self._stream is not None else sys.stdin
        for line in stream:
            self._line_count += 1
            yield line.rstrip("\n\r")

    def read_batches(self) -> Iterator[LogBatch]:
        """Read batches from stdin, yielding one at a time."""
        for batch in batch_lines(self._read_lines(), self.batch_size, source="<stdin>"):
            self._batch_count += 1
            yield batch

    def metadata(self) -> dict[str, str]:
        """
        Get source metadata.

        Note: Counts are only final once reading completes.
        """
        return {
            "source_type": "stdin",
            "path": "<stdin>",
            "name": "stdin",
            "lines_read": str(self._line_count),
            "batches_read": str(self._batch_count),
        }
