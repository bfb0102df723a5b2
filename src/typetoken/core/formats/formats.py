"""
Format checks - string shapes with a fixed grammar.

Both checks read ``str(value)``, so any value can be passed:
1. Email - RFC 5322 style address syntax, via email-validator (no DNS)
2. UUID - RFC 4122 textual form, versions 1 to 5
"""

import logging
import re
from typing import Any

from email_validator import EmailNotValidError, validate_email

from typetoken.config import Settings, get_settings
from typetoken.core.text import to_text

logger = logging.getLogger(__name__)


class FormatChecker:
    """Syntactic email and UUID checks."""

    # 8-4-4-4-12 hex, version [1-5], variant [89ab]
    UUID_PATTERN = re.compile(
        r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
        re.IGNORECASE,
    )

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    def is_email(self, value: Any) -> bool:
        """
        Check email address syntax.

        Args:
            value: Any value; its str() form is checked

        Returns:
            True if the text is a well-formed address
        """
        try:
            validate_email(
                to_text(value),
                allow_smtputf8=self.settings.email_allow_smtputf8,
                allow_quoted_local=self.settings.email_allow_quoted_local,
                allow_domain_literal=self.settings.email_allow_domain_literal,
                check_deliverability=False,
            )
        except EmailNotValidError as e:
            logger.debug(f"Rejected email {to_text(value)!r}: {e}")
            return False
        return True

    def is_uuid(self, value: Any) -> bool:
        """Check the RFC 4122 v1-v5 textual form of str(value)."""
        # fullmatch so a trailing newline is not accepted
        return self.UUID_PATTERN.fullmatch(to_text(value)) is not None


def is_email(value: Any) -> bool:
    """Check email syntax using the environment settings."""
    return FormatChecker().is_email(value)


def is_uuid(value: Any) -> bool:
    """Check RFC 4122 v1-v5 UUID text."""
    return FormatChecker.UUID_PATTERN.fullmatch(to_text(value)) is not None
