"""Numeric prefix parsing - read leading numbers from a value's text."""

from typetoken.core.parsing.parsing import NumericPrefixParser, parse_float, parse_int

__all__ = ["NumericPrefixParser", "parse_float", "parse_int"]
