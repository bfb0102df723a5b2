"""
Validator - Check one value against a list of type tokens.

Tokens are tried in a fixed order, not list order. The first reserved
token present decides the outcome on its own:
1. None token - a None value passes immediately
2. parseInt - a leading integer must be readable
3. parseFloat - a leading float must be readable
4. email - the text must be a well-formed address
5. explicit - the value must equal one of the other tokens
6. uuid - the text must be an RFC 4122 (v1-v5) UUID
7. otherwise - the classifier's name for the value must be a token

check() reports the outcome; validate() raises on failure, using the
caller's error when one is given and the default error otherwise.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from typetoken.config import Settings, get_settings
from typetoken.core.classifier import Classifier
from typetoken.core.formats import FormatChecker
from typetoken.core.models import FailureKind, Token
from typetoken.core.parsing import NumericPrefixParser
from typetoken.core.text import to_text
from typetoken.exceptions import (
    EmailError,
    ExplicitError,
    ParseFloatError,
    ParseIntError,
    TypeMismatchError,
    TypeNameError,
    UUIDError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationFailure:
    """Why a value was rejected, and the default error that describes it."""

    kind: FailureKind
    message: str
    value: Any

    # Default error class per failure kind
    ERROR_CLASSES = {
        FailureKind.PARSE_FLOAT: ParseFloatError,
        FailureKind.EMAIL: EmailError,
        FailureKind.EXPLICIT: ExplicitError,
        FailureKind.UUID: UUIDError,
        FailureKind.TYPE: TypeNameError,
    }

    def to_exception(self) -> TypeMismatchError:
        """Build the default error. Only parseInt keeps the value on it."""
        if self.kind == FailureKind.PARSE_INT:
            return ParseIntError(self.message, self.value)
        return self.ERROR_CLASSES[self.kind](self.message)


@dataclass(frozen=True)
class ValidationResult:
    """Result of checking a value."""

    valid: bool
    failure: ValidationFailure | None = None


_PASSED = ValidationResult(valid=True)


class Validator:
    """
    Validate single values against type tokens.

    Holds no per-call state; one instance can serve any number of callers.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.classifier = Classifier()
        self.parser = NumericPrefixParser()
        self.formats = FormatChecker(self.settings)

    def check(self, value: Any, tokens: Sequence[Any]) -> ValidationResult:
        """
        Check a value without raising.

        Args:
            value: The value to check; never modified
            tokens: Type tokens; never modified

        Returns:
            ValidationResult, with the failure set when the value is rejected
        """
        if None in tokens and value is None:
            return _PASSED

        if Token.PARSE_INT in tokens:
            return self._check_parse_int(value)

        if Token.PARSE_FLOAT in tokens:
            return self._check_parse_float(value)

        if Token.EMAIL in tokens:
            return self._check_email(value)

        if Token.EXPLICIT in tokens:
            return self._check_explicit(value, tokens)

        if Token.UUID in tokens:
            return self._check_uuid(value)

        return self._check_type_name(value, tokens)

    def validate(
        self,
        value: Any,
        tokens: Sequence[Any],
        custom_error: BaseException | type[BaseException] | None = None,
    ) -> None:
        """
        Validate a value, raising on failure.

        Args:
            value: The value to check; never modified
            tokens: Type tokens; never modified
            custom_error: Exception (instance or class) raised as-is instead
                of the default error

        Raises:
            TypeError: value rejected and custom_error is not an exception
                instance or class
            TypeMismatchError: value rejected and no custom_error given
        """
        failure = self.check(value, tokens).failure
        if failure is None:
            return

        logger.debug(f"{failure.kind.value}: {failure.message}")

        if custom_error is not None:
            if not _is_raisable(custom_error):
                raise TypeError(
                    "custom_error must be an exception instance or class, "
                    f"got: {type(custom_error).__name__}"
                )
            raise custom_error
        raise failure.to_exception()

    # -------------------------------------------------------------------------
    # Branches
    # -------------------------------------------------------------------------

    def _check_parse_int(self, value: Any) -> ValidationResult:
        if self.parser.parse_int(value) is not None:
            return _PASSED
        return self._fail(
            FailureKind.PARSE_INT,
            f"Expected parseInt. Received: {self.classifier.classify(value).value}",
            value,
        )

    def _check_parse_float(self, value: Any) -> ValidationResult:
        if self.parser.parse_float(value) is not None:
            return _PASSED
        return self._fail(
            FailureKind.PARSE_FLOAT,
            f"Expected parseFloat. Received: {self.classifier.classify(value).value}",
            value,
        )

    def _check_email(self, value: Any) -> ValidationResult:
        if self.formats.is_email(value):
            return _PASSED
        return self._fail(FailureKind.EMAIL, f"Expected email. Received: {to_text(value)}", value)

    def _check_explicit(self, value: Any, tokens: Sequence[Any]) -> ValidationResult:
        allowed = [token for token in tokens if token != Token.EXPLICIT]
        if any(_strict_equals(value, token) for token in allowed):
            return _PASSED
        return self._fail(
            FailureKind.EXPLICIT,
            f"Expected explicitly {_join_tokens(allowed)}. Received: {to_text(value)}",
            value,
        )

    def _check_uuid(self, value: Any) -> ValidationResult:
        if self.formats.is_uuid(value):
            return _PASSED
        return self._fail(FailureKind.UUID, f"Expected uuid. Received: {to_text(value)}", value)

    def _check_type_name(self, value: Any, tokens: Sequence[Any]) -> ValidationResult:
        type_name = self.classifier.classify(value)
        if type_name in tokens:
            return _PASSED
        return self._fail(
            FailureKind.TYPE,
            f"Expected {_join_tokens(tokens)}. Received: {type_name.value}",
            value,
        )

    def _fail(self, kind: FailureKind, message: str, value: Any) -> ValidationResult:
        return ValidationResult(
            valid=False,
            failure=ValidationFailure(kind=kind, message=message, value=value),
        )


def _is_raisable(error: Any) -> bool:
    if isinstance(error, BaseException):
        return True
    return isinstance(error, type) and issubclass(error, BaseException)


def _strict_equals(value: Any, token: Any) -> bool:
    """Equality without cross-type coercion (1 != True, 1 != 1.0, "1" != 1)."""
    if value is token:
        return True
    if isinstance(value, str) and isinstance(token, str):
        return value == token
    return type(value) is type(token) and value == token


def _join_tokens(tokens: Sequence[Any]) -> str:
    # The None token is written as "null" rather than left blank
    return "|".join("null" if token is None else to_text(token) for token in tokens)


@lru_cache
def get_validator() -> Validator:
    """Get cached validator built from the environment settings."""
    return Validator()


def check(value: Any, tokens: Sequence[Any]) -> ValidationResult:
    """Check ``value`` against ``tokens`` with the shared validator."""
    return get_validator().check(value, tokens)


def validate(
    value: Any,
    tokens: Sequence[Any],
    custom_error: BaseException | type[BaseException] | None = None,
) -> None:
    """Validate ``value`` against ``tokens`` with the shared validator."""
    get_validator().validate(value, tokens, custom_error)
