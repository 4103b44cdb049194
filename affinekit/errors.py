"""
Exception hierarchy for affinekit.

Every error also subclasses the matching builtin so callers may catch
either the specific affinekit error or the plain ValueError/TypeError.
"""
from __future__ import annotations


class AffineError(Exception):
    """Base class for all affinekit errors."""
    pass


class ZeroScalingError(AffineError, ValueError):
    """Raised when a scaling by zero is requested (non-invertible)."""
    pass


class SpaceMismatchError(AffineError, TypeError):
    """Raised when transformations over different vector spaces are combined."""
    pass


class TransposeMismatchError(AffineError, ValueError):
    """Raised when a transformation's transpose disagrees with its linear part."""
    pass


__all__ = [
    'AffineError',
    'ZeroScalingError',
    'SpaceMismatchError',
    'TransposeMismatchError',
]
