"""
Field value sanitization for delimited output.
"""

__all__ = ["LINE_BREAK", "sanitize_field_value"]


LINE_BREAK = "\n"


def sanitize_field_value(value: str | None) -> str | None:
    """
    Make a field value safe for a single output line.

    Every newline is replaced with one space so a single log entry
    never spans multiple output lines. None passes through unchanged.

    Args:
        value: The raw field value

    Returns:
        Sanitized value
    """
    if value and LINE_BREAK in value:
        return value.replace(LINE_BREAK, " ")
    return value
