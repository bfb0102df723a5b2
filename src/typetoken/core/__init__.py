"""typetoken core - validator and its collaborators."""

from typetoken.core.models import UNDEFINED, FailureKind, Token, TypeName

__all__ = [
    "UNDEFINED",
    "FailureKind",
    "Token",
    "TypeName",
]
