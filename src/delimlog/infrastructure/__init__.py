"""
Infrastructure layer for delimlog.

Contains adapters that implement the ports defined in the application layer.
These connect the formatter to external systems (files, stdin, streams).
"""

from delimlog.infrastructure.sources import (
    JsonLinesBatchSource,
    StdinBatchSource,
    decode_entry,
)
from delimlog.infrastructure.transports import (
    StreamTransport,
    MemoryTransport,
)

__all__ = [
    # Sources
    "JsonLinesBatchSource",
    "StdinBatchSource",
    "decode_entry",
    # Transports
    "StreamTransport",
    "MemoryTransport",
]
