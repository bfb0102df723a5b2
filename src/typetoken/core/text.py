"""Text form of arbitrary values, as read by the parsers and format checks."""

from typing import Any


def to_text(value: Any) -> str:
    """
    Return ``str(value)``, or a placeholder when it cannot be written.

    Ints longer than ``sys.get_int_max_str_digits()`` refuse decimal
    conversion. Their placeholder matches no numeral, email or UUID.
    """
    try:
        return str(value)
    except ValueError:
        return f"<{type(value).__name__} too large to print>"
