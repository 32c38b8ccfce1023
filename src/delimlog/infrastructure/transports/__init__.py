"""
Transport adapters for delimlog.
"""

from delimlog.infrastructure.transports.stream_transport import MemoryTransport, StreamTransport

__all__ = [
    "StreamTransport",
    "MemoryTransport",
]
