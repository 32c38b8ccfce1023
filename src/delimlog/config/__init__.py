"""
Configuration surface for delimlog.
"""

from delimlog.config.options import FormatterOption, load_formatter_config, parse_bool

__all__ = [
    "FormatterOption",
    "load_formatter_config",
    "parse_bool",
]
