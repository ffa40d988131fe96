"""
2D vector helpers used by the Line model and the intersection queries.

This module provides:
    • resolve_scalar_type(dtype)
    • as_vector(values, dtype)
    • dot_perp(a, b)
    • normalize(v)
    • length(v)
    • is_zero(s)
    • max_scalar(dtype)

Vectors and points are numpy arrays of shape (2,) with a floating dtype.
All comparisons are exact; nothing here applies a tolerance.
"""

from typing import Sequence, Union

import numpy as np

from config import DEFAULT_SCALAR_TYPE, SUPPORTED_SCALAR_TYPES


VectorLike = Union[np.ndarray, Sequence[float]]


# -------------------------------------------------------------------------
#  SCALAR TYPE HANDLING
# -------------------------------------------------------------------------

def resolve_scalar_type(dtype=None) -> np.dtype:
    """
    Returns the numpy dtype to use for a vector, falling back to
    DEFAULT_SCALAR_TYPE. Raises ValueError for anything that is not one
    of the SUPPORTED_SCALAR_TYPES.
    """
    if dtype is None:
        dtype = DEFAULT_SCALAR_TYPE
    resolved = np.dtype(dtype)
    if resolved not in [np.dtype(t) for t in SUPPORTED_SCALAR_TYPES]:
        raise ValueError(f"Unsupported scalar type: {resolved}")
    return resolved


def max_scalar(dtype) -> np.floating:
    """Largest finite value representable by the scalar type."""
    return np.finfo(dtype).max


# -------------------------------------------------------------------------
#  CONSTRUCTION
# -------------------------------------------------------------------------

def as_vector(values: VectorLike, dtype=None) -> np.ndarray:
    """
    Build a (2,) array from any 2-element sequence.

    Example:
        as_vector((1, 2))  →  array([1., 2.])
    """
    arr = np.array(values, dtype=resolve_scalar_type(dtype))
    if arr.shape != (2,):
        raise ValueError(f"Expected a 2D vector, got shape {arr.shape}")
    return arr


def zero_vector(dtype=None) -> np.ndarray:
    return np.zeros(2, dtype=resolve_scalar_type(dtype))


# -------------------------------------------------------------------------
#  PRODUCTS & NORMALIZATION
# -------------------------------------------------------------------------

def dot_perp(a: np.ndarray, b: np.ndarray) -> np.floating:
    """
    Perpendicular dot product: a.x * b.y - a.y * b.x.

    This is the 2D analogue of the cross product; it is exactly zero
    when a and b are parallel (or either is zero).
    """
    return a[0] * b[1] - a[1] * b[0]


def normalize(v: np.ndarray) -> np.ndarray:
    """
    Unit vector in the direction of v.

    Total: the zero vector normalizes to the zero vector instead of
    producing NaNs. v is first scaled by its largest component so the
    length of a finite vector cannot overflow.
    """
    scale = max(abs(v[0]), abs(v[1]))
    if not scale > 0:
        return np.zeros_like(v)
    scaled = v / scale
    return scaled / np.hypot(scaled[0], scaled[1])


def length(v: np.ndarray) -> np.floating:
    """
    Euclidean length of v, scaled by its largest component before
    squaring so small vectors do not underflow to zero.
    """
    scale = max(abs(v[0]), abs(v[1]))
    if not scale > 0:
        return v.dtype.type(0)
    scaled = v / scale
    return scale * np.hypot(scaled[0], scaled[1])


def is_zero(s) -> bool:
    """Exact zero test."""
    return bool(s == 0)
