"""
Classifier - Canonical type names for arbitrary values.

Every value gets exactly one name from TypeName. The order of checks
matters where Python types overlap:
1. bool before number (bool is an int subclass)
2. NaN before number
3. str/bytes before generic sequences
4. classes before callables (classes are callable)
"""

import datetime
import inspect
import math
import numbers
import re
from collections.abc import Awaitable, Mapping
from decimal import Decimal
from typing import Any

from typetoken.core.models import UNDEFINED, TypeName


class Classifier:
    """Map a value to its TypeName."""

    # Checked in order after the special cases in classify()
    TYPE_NAME_MAP: list[tuple[tuple[type, ...], TypeName]] = [
        ((str,), TypeName.STRING),
        ((bytes, bytearray, memoryview), TypeName.BYTES),
        ((list, tuple), TypeName.ARRAY),
        ((set, frozenset), TypeName.SET),
        ((Mapping,), TypeName.OBJECT),
        ((datetime.date,), TypeName.DATE),
        ((re.Pattern,), TypeName.REGEXP),
        ((BaseException,), TypeName.ERROR),
    ]

    def classify(self, value: Any) -> TypeName:
        """
        Classify a value.

        Args:
            value: Anything

        Returns:
            The TypeName for the value; OBJECT when nothing narrower applies
        """
        if value is None:
            return TypeName.NULL
        if value is UNDEFINED:
            return TypeName.UNDEFINED
        if isinstance(value, bool):
            return TypeName.BOOLEAN

        number = self._classify_number(value)
        if number is not None:
            return number

        for types, name in self.TYPE_NAME_MAP:
            if isinstance(value, types):
                return name

        if inspect.isclass(value):
            return TypeName.CLASS
        if inspect.isgenerator(value) or inspect.isasyncgen(value):
            return TypeName.GENERATOR
        if isinstance(value, Awaitable):
            return TypeName.PROMISE
        if callable(value):
            return TypeName.FUNCTION

        return TypeName.OBJECT

    def _classify_number(self, value: Any) -> TypeName | None:
        """Numbers split three ways: nan, complex, number."""
        if isinstance(value, Decimal):
            return TypeName.NAN if value.is_nan() else TypeName.NUMBER
        if not isinstance(value, numbers.Number):
            return None
        if not isinstance(value, numbers.Real):
            return TypeName.COMPLEX
        # Rationals (ints included) are never NaN and may not fit a float
        if isinstance(value, numbers.Rational):
            return TypeName.NUMBER
        return TypeName.NAN if math.isnan(value) else TypeName.NUMBER


_CLASSIFIER = Classifier()


def classify(value: Any) -> str:
    """Return the canonical type name of ``value`` as a plain string."""
    return _CLASSIFIER.classify(value).value
