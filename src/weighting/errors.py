"""
errors.py
- Error types raised by the weighting core.
"""
from __future__ import annotations
from sklearn.exceptions import NotFittedError

__all__ = ["DimensionMismatchError", "ModelDecodeError", "NotFittedError"]


class DimensionMismatchError(ValueError):
    """IDF model width does not match the term-row count of the input."""


class ModelDecodeError(ValueError):
    """Persisted diagonal model stream is truncated or malformed."""
