"""
Domain entities for delimlog.

ColumnSchema and FormatterConfig are immutable value objects built once
at configuration time. Both validate eagerly so a bad configuration
fails before the first batch is formatted.
"""

import warnings
from dataclasses import dataclass
from typing import Iterator

from delimlog.core.exceptions import ConfigurationError

__all__ = [
    "ColumnSchema",
    "FormatterConfig",
    "DEFAULT_SEPARATOR",
    "DEFAULT_LINE_END",
]

DEFAULT_SEPARATOR = ","
DEFAULT_LINE_END = ""


class ColumnSchema:
    """
    Ordered mapping from field name to 0-based output position.

    Positions follow the left-to-right order of the declared names. A
    repeated name maps to its last position only; earlier occurrences
    still occupy a slot, which is always rendered empty.

    Example:
        schema = ColumnSchema.parse("host,level,message")
        schema.position("level")  # 1
        len(schema)               # 3
    """

    __slots__ = ("_names", "_positions")

    def __init__(self, names: list[str] | tuple[str, ...]):
        """
        Initialize the schema.

        Args:
            names: Declared column names in output order
        """
        self._names = tuple(names)
        if not self._names:
            raise ConfigurationError("Column list must not be empty", config_key="columns")
        if all(not str(name).strip() for name in self._names):
            raise ConfigurationError("Missing parameter: columns", config_key="columns")

        positions: dict[str, int] = {}
        duplicates: list[str] = []
        for index, name in enumerate(self._names):
            if name in positions:
                duplicates.append(name)
            positions[name] = index
        self._positions = positions

        if duplicates:
            warnings.warn(
                f"Duplicate column names {sorted(set(duplicates))}: only the last "
                "occurrence of each is populated, earlier positions stay empty",
                UserWarning,
                stacklevel=2,
            )

    @classmethod
    def parse(cls, columns: str) -> "ColumnSchema":
        """
        Build a schema from a comma-separated column list.

        Empty tokens are kept, so "a,,b" declares three positions.

        Raises:
            ConfigurationError: If the list is missing or blank
        """
        if columns is None or not str(columns).strip():
            raise ConfigurationError("Missing parameter: columns", config_key="columns")
        return cls(str(columns).split(","))

    @property
    def names(self) -> tuple[str, ...]:
        """Declared names, duplicates included."""
        return self._names

    @property
    def width(self) -> int:
        return len(self._names)

    def position(self, name: str) -> int | None:
        """Return the output position of a field, or None if undeclared."""
        return self._positions.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._positions

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ColumnSchema):
            return self._names == other._names
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._names)

    def __repr__(self) -> str:
        return f"ColumnSchema({','.join(self._names)!r})"


@dataclass(frozen=True)
class FormatterConfig:
    """
    Immutable configuration snapshot for a RecordFormatter.

    Validated on construction; every invariant violation raises
    ConfigurationError naming the offending option.
    """
    columns: ColumnSchema
    destination: str
    use_record_time: bool = False
    append_timestamp: bool = False
    separator: str = DEFAULT_SEPARATOR
    line_end: str = DEFAULT_LINE_END
    drop_percent: int = 0
    append_local_time: bool = False
    local_time_column: str | None = None

    def __post_init__(self):
        if isinstance(self.columns, str):
            object.__setattr__(self, "columns", ColumnSchema.parse(self.columns))
        elif isinstance(self.columns, (list, tuple)):
            object.__setattr__(self, "columns", ColumnSchema(self.columns))
        elif self.columns is None:
            raise ConfigurationError("Missing parameter: columns", config_key="columns")
        elif not isinstance(self.columns, ColumnSchema):
            raise ConfigurationError(
                f"columns must be a string or a list of names, got {type(self.columns).__name__}",
                config_key="columns",
            )

        if not isinstance(self.separator, str) or len(self.separator) != 1:
            raise ConfigurationError(
                f"separator must be exactly one character: {self.separator!r}",
                config_key="separator-char",
            )

        if self.destination is None or not str(self.destination).strip():
            raise ConfigurationError("Missing parameter: destination", config_key="destination")

        if self.line_end is None:
            object.__setattr__(self, "line_end", DEFAULT_LINE_END)

        if isinstance(self.drop_percent, bool) or not isinstance(self.drop_percent, int):
            raise ConfigurationError(
                f"drop percent must be an integer: {self.drop_percent!r}",
                config_key="drop-percent",
            )
        if not 0 <= self.drop_percent <= 100:
            raise ConfigurationError(
                f"drop percent must be between 0 and 100: {self.drop_percent}",
                config_key="drop-percent",
            )

        if self.append_local_time:
            if not isinstance(self.local_time_column, str) or not self.local_time_column.strip():
                raise ConfigurationError(
                    "Missing parameter: local-time-field-name",
                    config_key="local-time-field-name",
                )
            if self.local_time_column not in self.columns:
                raise ConfigurationError(
                    f"Field '{self.local_time_column}' not exist in columns",
                    config_key="local-time-field-name",
                )

    @property
    def width(self) -> int:
        """Number of output fields per record."""
        if self.append_timestamp:
            return len(self.columns) + 1
        return len(self.columns)

    @property
    def timestamp_position(self) -> int | None:
        """Slot holding the appended timestamp, if any."""
        if self.append_timestamp:
            return self.width - 1
        return None

    @property
    def local_time_position(self) -> int | None:
        """Slot overwritten with local time, if any."""
        if self.append_local_time:
            return self.columns.position(self.local_time_column)
        return None
