"""
Pytest fixtures for delimlog tests.
"""

import json

import pytest

from delimlog.core.models import LogBatch, LogEntry
from delimlog.domain.entities import ColumnSchema, FormatterConfig


class FixedClock:
    """Clock returning a fixed millisecond value, advanced by hand."""

    def __init__(self, millis: int = 1_706_350_532_123):
        self.millis = millis
        self.calls = 0

    def now_millis(self) -> int:
        self.calls += 1
        return self.millis


class SequenceRandomSource:
    """Random source replaying a fixed sequence of draws."""

    def __init__(self, draws: list[int]):
        self.draws = list(draws)
        self.bounds: list[int] = []

    def next_int(self, bound: int) -> int:
        self.bounds.append(bound)
        return self.draws.pop(0)


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Deterministic wall clock."""
    return FixedClock()


@pytest.fixture
def abc_config() -> FormatterConfig:
    """Three-column config with defaults."""
    return FormatterConfig(columns=ColumnSchema.parse("a,b,c"), destination="test-store")


@pytest.fixture
def abc_entry() -> LogEntry:
    """Entry populating a, b and c."""
    return LogEntry(contents=(("a", "1"), ("b", "2"), ("c", "3")), time=1000)


@pytest.fixture
def sample_batch() -> LogBatch:
    """Batch of five entries with distinct values."""
    return LogBatch(entries=tuple(
        LogEntry(contents=(("a", f"a{i}"), ("b", f"b{i}"), ("c", f"c{i}")), time=1000 + i)
        for i in range(5)
    ))


@pytest.fixture
def sample_jsonl_lines() -> list[str]:
    """JSON-lines entries in both contents forms."""
    return [
        json.dumps({"time": 1706350532, "contents": {"host": "web-1", "level": "INFO", "msg": "started"}}),
        json.dumps({"time": "2026-01-27T10:15:33Z", "contents": [["host", "web-2"], ["level", "WARN"]]}),
        "",
        json.dumps({"time": 1706350534, "fields": {"host": "web-3", "msg": "line1\nline2"}}),
    ]


@pytest.fixture
def temp_entry_file(tmp_path, sample_jsonl_lines):
    """Create a temporary JSON-lines entry file."""
    entry_file = tmp_path / "entries.jsonl"
    entry_file.write_text("\n".join(sample_jsonl_lines) + "\n")
    return entry_file


@pytest.fixture
def random_draws():
    """Factory for a random source replaying the given draws."""
    return SequenceRandomSource
