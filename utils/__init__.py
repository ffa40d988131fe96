"""
Utility Functions

Provides the 2D vector operations used by the Line model and the
intersection queries.
"""

from .vector import (
    resolve_scalar_type,
    as_vector,
    zero_vector,
    dot_perp,
    normalize,
    length,
    is_zero,
    max_scalar,
)

__all__ = [
    "resolve_scalar_type",
    "as_vector",
    "zero_vector",
    "dot_perp",
    "normalize",
    "length",
    "is_zero",
    "max_scalar",
]
