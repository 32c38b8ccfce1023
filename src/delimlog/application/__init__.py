"""
Application layer for delimlog.

Contains the formatting use case and the ports it depends on.
"""

from delimlog.application.ports import LogBatchSource, RecordTransport
from delimlog.application.format_logs import FormatLogsUseCase, FormatStats

__all__ = [
    "LogBatchSource",
    "RecordTransport",
    "FormatLogsUseCase",
    "FormatStats",
]
