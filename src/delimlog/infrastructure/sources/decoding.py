"""
JSON-lines entry decoding shared by the batch sources.

Each non-blank line is one object:

    {"time": 1706350532, "contents": {"host": "web-1", "level": "INFO"}}
    {"time": "2026-01-27T10:15:32Z", "contents": [["k", "v"], ["k", "v2"]]}

"fields" is accepted as an alias of "contents". The list form keeps
duplicate keys in order.
"""

import json
import math
from datetime import timezone
from typing import Any, Iterable, Iterator

from dateutil import parser as dateutil_parser

from delimlog.core.exceptions import EntryDecodeError
from delimlog.core.models import LogBatch, LogEntry

__all__ = ["decode_entry", "batch_lines", "DEFAULT_BATCH_SIZE"]

DEFAULT_BATCH_SIZE = 1000


def _parse_time(value: Any) -> int | None:
    """Convert a time value to integer epoch seconds."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    text = str(value).strip()
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        pass
    else:
        # NaN and infinities have no epoch equivalent
        return int(number) if math.isfinite(number) else None
    # Strict ISO-8601 first, then dateutil's general parser
    try:
        parsed = dateutil_parser.isoparse(text)
    except (ValueError, OverflowError):
        try:
            parsed = dateutil_parser.parse(text)
        except (ValueError, OverflowError):
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    try:
        return int(parsed.timestamp())
    except (ValueError, OverflowError, OSError):
        return None


def _stringify(value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _parse_contents(raw: Any) -> tuple[tuple[str, str | None], ...] | None:
    if raw is None:
        return ()
    if isinstance(raw, dict):
        return tuple((str(key), _stringify(value)) for key, value in raw.items())
    if isinstance(raw, list):
        pairs = []
        for item in raw:
            if not isinstance(item, (list, tuple)) or len(item) != 2:
                return None
            pairs.append((str(item[0]), _stringify(item[1])))
        return tuple(pairs)
    return None


def decode_entry(line: str, line_number: int | None = None) -> LogEntry:
    """
    Decode one JSON-lines record into a LogEntry.

    Args:
        line: Raw input line
        line_number: Position in the source, for error reporting

    Returns:
        Decoded LogEntry

    Raises:
        EntryDecodeError: If the line is not a usable entry object
    """
    try:
        data = json.loads(line)
    except json.JSONDecodeError as e:
        raise EntryDecodeError(f"Invalid JSON: {e.msg}", line=line, line_number=line_number) from e

    if not isinstance(data, dict):
        raise EntryDecodeError("Entry must be a JSON object", line=line, line_number=line_number)

    time = _parse_time(data.get("time"))
    if time is None:
        raise EntryDecodeError("Entry has no usable 'time'", line=line, line_number=line_number)

    contents = _parse_contents(data.get("contents", data.get("fields")))
    if contents is None:
        raise EntryDecodeError(
            "'contents' must be an object or a list of [key, value] pairs",
            line=line,
            line_number=line_number,
        )
    return LogEntry(contents=contents, time=time)


def batch_lines(
    lines: Iterable[str],
    batch_size: int,
    source: str | None = None,
) -> Iterator[LogBatch]:
    """
    Decode lines and group the entries into batches of at most batch_size.

    Blank lines are skipped but still counted for line numbers.
    """
    pending: list[LogEntry] = []
    for line_number, line in enumerate(lines, 1):
        if not line.strip():
            continue
        pending.append(decode_entry(line, line_number))
        if len(pending) >= batch_size:
            yield LogBatch(entries=tuple(pending), source=source)
            pending = []
    if pending:
        yield LogBatch(entries=tuple(pending), source=source)
