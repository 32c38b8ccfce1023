"""
File batch source for delimlog.

Streams a JSON-lines entry file and groups entries into batches
without loading the whole file into memory.
"""

from pathlib import Path
from typing import Iterator

from delimlog.core.models import LogBatch
from delimlog.infrastructure.sources.decoding import DEFAULT_BATCH_SIZE, batch_lines

__all__ = ["JsonLinesBatchSource"]


class JsonLinesBatchSource:
    """
    Batch source reading a JSON-lines file.

    Example:
        source = JsonLinesBatchSource("/var/spool/entries.jsonl", batch_size=500)
        for batch in source.read_batches():
            print(len(batch))
    """

    def __init__(
        self,
        path: str | Path,
        batch_size: int = DEFAULT_BATCH_SIZE,
        encoding: str = "utf-8",
        errors: str = "replace",
    ):
        """
        Initialize file batch source.

        Args:
            path: Path to the entry file
            batch_size: Maximum entries per batch
            encoding: File encoding (default: utf-8)
            errors: How to handle encoding errors (default: replace)
        """
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive: {batch_size}")

        self.path = Path(path)
        self.batch_size = batch_size
        self.encoding = encoding
        self.errors = errors
        self._batch_count = 0

        if not self.path.exists():
            raise FileNotFoundError(f"File not found: {self.path}")

    def _read_lines(self) -> Iterator[str]:
        with open(
            self.path,
            "r",
            encoding=self.encoding,
            errors=self.errors
        ) as f:
            for line in f:
                yield line.rstrip("\n\r")

    def read_batches(self) -> Iterator[LogBatch]:
        """
        Read batches from the file, yielding one at a time.

        Raises:
            EntryDecodeError: On the first line that cannot be decoded
        """
        for batch in batch_lines(self._read_lines(), self.batch_size, source=str(self.path)):
            self._batch_count += 1
            yield batch

    def metadata(self) -> dict[str, str]:
        """Get source metadata."""
        stat = self.path.stat()
        return {
            "source_type": "file",
            "path": str(self.path.absolute()),
            "name": self.path.name,
            "size_bytes": str(stat.st_size),
            "batches_read": str(self._batch_count),
        }
