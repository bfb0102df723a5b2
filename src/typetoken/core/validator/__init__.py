"""Validator - Check single values against type tokens."""

from typetoken.core.validator.validator import (
    ValidationFailure,
    ValidationResult,
    Validator,
    check,
    get_validator,
    validate,
)

__all__ = [
    "ValidationFailure",
    "ValidationResult",
    "Validator",
    "check",
    "get_validator",
    "validate",
]
