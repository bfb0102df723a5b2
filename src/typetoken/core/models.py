"""Core contracts for typetoken.

These enums define the closed vocabularies the validator works with:
- Reserved tokens that select a special check
- Type names produced by the classifier
- Failure kinds, one per default error class
"""

from enum import Enum


# =============================================================================
# Enums
# =============================================================================


class Token(str, Enum):
    """Reserved tokens. Checked in this order, first match wins."""

    PARSE_INT = "parseInt"
    PARSE_FLOAT = "parseFloat"
    EMAIL = "email"
    EXPLICIT = "explicit"
    UUID = "uuid"

    def __str__(self) -> str:
        return self.value


class TypeName(str, Enum):
    """Names the classifier can produce. Tokens outside this set never match."""

    NULL = "null"
    UNDEFINED = "undefined"
    BOOLEAN = "boolean"
    NUMBER = "number"
    NAN = "nan"
    COMPLEX = "complex"
    STRING = "string"
    BYTES = "bytes"
    ARRAY = "array"
    SET = "set"
    OBJECT = "object"
    DATE = "date"
    REGEXP = "regexp"
    ERROR = "error"
    CLASS = "class"
    FUNCTION = "function"
    GENERATOR = "generator"
    PROMISE = "promise"

    def __str__(self) -> str:
        return self.value


class FailureKind(str, Enum):
    """Which branch rejected the value."""

    PARSE_INT = "PARSE_INT"
    PARSE_FLOAT = "PARSE_FLOAT"
    EMAIL = "EMAIL"
    EXPLICIT = "EXPLICIT"
    UUID = "UUID"
    TYPE = "TYPE"


# =============================================================================
# Sentinels
# =============================================================================


class _Undefined:
    """Marker for a value that was never provided (distinct from None)."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __str__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()
