"""
Domain layer for delimlog.

Contains the column schema, the formatter configuration and the
protocols for the formatter's ambient inputs. This layer has no
dependencies on external frameworks or infrastructure.
"""

from delimlog.domain.entities import (
    ColumnSchema,
    FormatterConfig,
    DEFAULT_SEPARATOR,
    DEFAULT_LINE_END,
)
from delimlog.domain.services import (
    Clock,
    RandomSource,
)

__all__ = [
    # Entities
    "ColumnSchema",
    "FormatterConfig",
    "DEFAULT_SEPARATOR",
    "DEFAULT_LINE_END",
    # Service protocols
    "Clock",
    "RandomSource",
]
