"""Default errors raised by the validator when no custom error is supplied."""

from typing import Any


class TypeMismatchError(TypeError):
    """Base class for every default validation error."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ParseIntError(TypeMismatchError):
    """Value has no leading integer.

    The only default error that keeps the offending value, as ``value``.
    """

    def __init__(self, message: str, value: Any):
        super().__init__(message)
        self.value = value


class ParseFloatError(TypeMismatchError):
    """Value has no leading float."""


class EmailError(TypeMismatchError):
    """Value is not a well-formed email address."""


class ExplicitError(TypeMismatchError):
    """Value is not one of the explicitly allowed literals."""


class UUIDError(TypeMismatchError):
    """Value is not an RFC 4122 (v1-v5) UUID string."""


class TypeNameError(TypeMismatchError):
    """Classified type of the value is not among the tokens."""
