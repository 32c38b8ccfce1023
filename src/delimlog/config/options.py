"""
Recognized formatter options and the loader that turns them into a
FormatterConfig.

Options arrive as a flat mapping, usually of strings (for example
parsed from a property file or repeated CLI flags); native Python
values are accepted too.
"""

import logging
from enum import Enum
from typing import Any, Mapping

from delimlog.core.exceptions import ConfigurationError
from delimlog.domain.entities import (
    ColumnSchema,
    FormatterConfig,
    DEFAULT_LINE_END,
    DEFAULT_SEPARATOR,
)

__all__ = ["FormatterOption", "load_formatter_config", "parse_bool"]

logger = logging.getLogger(__name__)

_TRUE_VALUES = frozenset({"true", "yes", "1", "on"})
_FALSE_VALUES = frozenset({"false", "no", "0", "off"})


class FormatterOption(Enum):
    """
    Option keys understood by load_formatter_config.

    Each member carries its key, a human description and its default
    (None for required options).
    """
    COLUMNS = ("columns", "Comma-separated ordered field list defining schema and output width", None)
    USE_RECORD_TIME = ("use-record-time", "Use the entry timestamp instead of local wall-clock time", False)
    SEPARATOR_CHAR = ("separator-char", "Single delimiter character", DEFAULT_SEPARATOR)
    LINE_END = ("line-end", "Suffix appended after the last field", DEFAULT_LINE_END)
    DESTINATION = ("destination", "Opaque sink identifier attached to every record", None)
    DROP_PERCENT = ("drop-percent", "Percentage of entries randomly discarded (0-100)", 0)
    APPEND_TIMESTAMP = ("append-timestamp", "Append an extra trailing timestamp column", False)
    APPEND_LOCAL_TIME = ("append-local-time", "Overwrite a named column with local time", False)
    LOCAL_TIME_FIELD_NAME = (
        "local-time-field-name",
        "Column overwritten with local time (required with append-local-time)",
        None,
    )

    def __init__(self, key: str, description: str, default: Any):
        self.key = key
        self.description = description
        self.default = default

    @classmethod
    def parse_key(cls, name: str) -> "FormatterOption | None":
        """
        Look up an option by key, accepting '-' or '_' as word separator.

        Returns None for unrecognized names.
        """
        normalized = name.strip().lower().replace("_", "-")
        for option in cls:
            if option.key == normalized:
                return option
        return None


def parse_bool(value: Any, key: str) -> bool:
    """
    Parse a boolean option value.

    Raises:
        ConfigurationError: If the value is not a recognizable boolean
    """
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean for {key}: {value!r}", config_key=key)


def _parse_int(value: Any, key: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"Invalid integer for {key}: {value!r}", config_key=key)
    try:
        return int(str(value).strip()) if isinstance(value, str) else int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Invalid integer for {key}: {value!r}", config_key=key) from None


def _parse_separator(value: Any) -> str:
    key = FormatterOption.SEPARATOR_CHAR.key
    text = str(value).strip()
    if len(text) != 1:
        raise ConfigurationError(
            f"{key} is invalid for delimited output: {value!r}",
            config_key=key,
        )
    return text


def load_formatter_config(options: Mapping[str, Any]) -> FormatterConfig:
    """
    Build a FormatterConfig from a flat option mapping.

    Args:
        options: Option key -> value; keys may use '-' or '_'

    Returns:
        Validated FormatterConfig

    Raises:
        ConfigurationError: On a missing required option or an invalid value
    """
    values: dict[FormatterOption, Any] = {}
    unknown = []
    for name, value in options.items():
        option = FormatterOption.parse_key(str(name))
        if option is None:
            unknown.append(name)
        elif value is not None:
            values[option] = value
    if unknown:
        logger.debug("Ignoring unrecognized options: %s", ", ".join(map(str, unknown)))

    def get(option: FormatterOption) -> Any:
        return values.get(option, option.default)

    columns = get(FormatterOption.COLUMNS)
    if columns is None or not str(columns).strip():
        raise ConfigurationError(
            f"Missing parameter: {FormatterOption.COLUMNS.key}",
            config_key=FormatterOption.COLUMNS.key,
        )

    destination = get(FormatterOption.DESTINATION)
    if destination is None or not str(destination).strip():
        raise ConfigurationError(
            f"Missing parameter: {FormatterOption.DESTINATION.key}",
            config_key=FormatterOption.DESTINATION.key,
        )

    local_time_column = get(FormatterOption.LOCAL_TIME_FIELD_NAME)

    config = FormatterConfig(
        columns=ColumnSchema.parse(str(columns)),
        destination=str(destination),
        use_record_time=parse_bool(get(FormatterOption.USE_RECORD_TIME), FormatterOption.USE_RECORD_TIME.key),
        append_timestamp=parse_bool(get(FormatterOption.APPEND_TIMESTAMP), FormatterOption.APPEND_TIMESTAMP.key),
        separator=_parse_separator(get(FormatterOption.SEPARATOR_CHAR)),
        line_end=str(get(FormatterOption.LINE_END)),
        drop_percent=_parse_int(get(FormatterOption.DROP_PERCENT), FormatterOption.DROP_PERCENT.key),
        append_local_time=parse_bool(get(FormatterOption.APPEND_LOCAL_TIME), FormatterOption.APPEND_LOCAL_TIME.key),
        local_time_column=None if local_time_column is None else str(local_time_column),
    )
    logger.debug("Loaded formatter config: %s", config)
    return config
