"""
Numeric prefix parsing.

Reads a number from the start of a value's text and ignores whatever
follows it, so "42px" reads as 42 and "3.14abc" as 3.14. A value with no
leading numeral reads as None ("not a number"). The value itself is never
converted; callers only learn whether a number is there.

Text is ``str(value)`` with leading whitespace removed. Ints and float
infinities are read directly, since their text can be unavailable
(over the int digit limit) or spelled differently ("inf").
"""

import math
import re
import sys
from typing import Any

from typetoken.core.text import to_text


class NumericPrefixParser:
    """Parse integers and floats from the beginning of a value's text."""

    HEX_INT_PATTERN = re.compile(r"([+-]?)0[xX]([0-9a-fA-F]*)")
    DEC_INT_PATTERN = re.compile(r"([+-]?)([0-9]+)")
    INFINITY_PATTERN = re.compile(r"([+-]?)Infinity")
    FLOAT_PATTERN = re.compile(
        r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    )

    # Below the smallest digit limit Python allows (640)
    DIGIT_CHUNK = 500

    def parse_int(self, value: Any) -> int | None:
        """
        Parse a leading integer.

        A "0x" prefix selects base 16, otherwise base 10.

        Args:
            value: Any value; its str() form is read

        Returns:
            The integer, or None when no digits lead the text
        """
        if _is_int(value):
            return int(value)

        text = self._text(value)

        match = self.HEX_INT_PATTERN.match(text)
        if match:
            # "0x" with no hex digits after it is not a number
            if not match.group(2):
                return None
            return self._signed(match.group(1), int(match.group(2), 16))

        match = self.DEC_INT_PATTERN.match(text)
        if match:
            return self._signed(match.group(1), self._decimal(match.group(2)))

        return None

    def parse_float(self, value: Any) -> float | None:
        """
        Parse a leading float.

        Accepts a decimal literal with optional fraction and exponent, or
        "Infinity". Float infinities themselves also read as infinity.

        Args:
            value: Any value; its str() form is read

        Returns:
            The float, or None when no numeral leads the text
        """
        if isinstance(value, float) and math.isinf(value):
            return float(value)
        if _is_int(value):
            try:
                return float(value)
            except OverflowError:
                return -math.inf if value < 0 else math.inf

        text = self._text(value)

        match = self.INFINITY_PATTERN.match(text)
        if match:
            return -math.inf if match.group(1) == "-" else math.inf

        match = self.FLOAT_PATTERN.match(text)
        if not match:
            return None

        # Exponent overflow reads as infinity, like any float literal
        return float(match.group())

    def _text(self, value: Any) -> str:
        return to_text(value).lstrip()

    def _decimal(self, digits: str) -> int:
        limit = sys.get_int_max_str_digits()
        if not limit or len(digits) <= limit:
            return int(digits)

        result = 0
        for start in range(0, len(digits), self.DIGIT_CHUNK):
            chunk = digits[start : start + self.DIGIT_CHUNK]
            result = result * 10 ** len(chunk) + int(chunk)
        return result

    def _signed(self, sign: str, magnitude: int) -> int:
        return -magnitude if sign == "-" else magnitude


def _is_int(value: Any) -> bool:
    # str(True) is "True", which holds no digits
    return isinstance(value, int) and not isinstance(value, bool)


_PARSER = NumericPrefixParser()


def parse_int(value: Any) -> int | None:
    """Parse a leading integer from ``str(value)``."""
    return _PARSER.parse_int(value)


def parse_float(value: Any) -> float | None:
    """Parse a leading float from ``str(value)``."""
    return _PARSER.parse_float(value)
