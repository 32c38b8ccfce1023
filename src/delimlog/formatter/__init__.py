"""
The record formatter and its default ambient providers.
"""

from delimlog.formatter.providers import SystemClock, ThreadLocalRandomSource
from delimlog.formatter.record_formatter import RecordFormatter, DROP_DRAW_BOUND

__all__ = [
    "RecordFormatter",
    "DROP_DRAW_BOUND",
    "SystemClock",
    "ThreadLocalRandomSource",
]
