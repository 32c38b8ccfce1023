"""
Batch source adapters for delimlog.
"""

from delimlog.infrastructure.sources.decoding import (
    DEFAULT_BATCH_SIZE,
    batch_lines,
    decode_entry,
)
from delimlog.infrastructure.sources.file_source import JsonLinesBatchSource
from delimlog.infrastructure.sources.stdin_source import StdinBatchSource

__all__ = [
    "DEFAULT_BATCH_SIZE",
    "batch_lines",
    "decode_entry",
    "JsonLinesBatchSource",
    "StdinBatchSource",
]
