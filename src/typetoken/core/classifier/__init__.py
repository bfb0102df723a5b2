"""Classifier - Canonical type names for arbitrary values."""

from typetoken.core.classifier.classifier import Classifier, classify

__all__ = ["Classifier", "classify"]
