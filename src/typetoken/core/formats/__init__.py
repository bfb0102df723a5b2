"""Format checks - email and UUID syntax."""

from typetoken.core.formats.formats import FormatChecker, is_email, is_uuid

__all__ = ["FormatChecker", "is_email", "is_uuid"]
