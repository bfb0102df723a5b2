"""typetoken - Runtime type and format validation for single values."""

import logging

from typetoken.config import Settings, configure_logging, get_settings
from typetoken.core.classifier import classify
from typetoken.core.formats import is_email, is_uuid
from typetoken.core.models import UNDEFINED, FailureKind, Token, TypeName
from typetoken.core.parsing import parse_float, parse_int
from typetoken.core.validator import (
    ValidationFailure,
    ValidationResult,
    Validator,
    check,
    validate,
)
from typetoken.exceptions import (
    EmailError,
    ExplicitError,
    ParseFloatError,
    ParseIntError,
    TypeMismatchError,
    TypeNameError,
    UUIDError,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "UNDEFINED",
    "EmailError",
    "ExplicitError",
    "FailureKind",
    "ParseFloatError",
    "ParseIntError",
    "Settings",
    "Token",
    "TypeMismatchError",
    "TypeName",
    "TypeNameError",
    "UUIDError",
    "ValidationFailure",
    "ValidationResult",
    "Validator",
    "__version__",
    "check",
    "classify",
    "configure_logging",
    "get_settings",
    "is_email",
    "is_uuid",
    "parse_float",
    "parse_int",
    "validate",
]
