"""
Intersection queries for two infinite 2D lines.

This module provides:
    • classify(line0, line1)   →  ExistenceResult
    • intersect(line0, line1)  →  ConstructionResult

The intersection of two lines solves P0 + s0 * D0 = P1 + s1 * D1.
Rewrite this as s0 * D0 - s1 * D1 = P1 - P0 = Q. If dot_perp(D0, D1) = 0
the lines are parallel; if additionally dot_perp(Q, D1) = 0 they are the
same line. Otherwise they meet in a single point where

    s0 = dot_perp(Q, D1) / dot_perp(D0, D1)
    s1 = dot_perp(Q, D0) / dot_perp(D0, D1)

All zero tests are exact. Callers that need a tolerance apply it
themselves.
"""

import numpy as np

from models.line import Line
from models.results import ConstructionResult, ExistenceResult
from utils.vector import dot_perp, is_zero, max_scalar, normalize, zero_vector
from config import UNBOUNDED_INTERSECTIONS


def _common_arrays(line0: Line, line1: Line):
    """
    Origins and directions of both lines cast to their common scalar type.
    """
    dtype = np.result_type(line0.dtype, line1.dtype)
    return (
        dtype,
        line0.origin.astype(dtype, copy=False),
        line0.direction.astype(dtype, copy=False),
        line1.origin.astype(dtype, copy=False),
        line1.direction.astype(dtype, copy=False),
    )


# ----------------------------------------------------------------------
#  EXISTENCE QUERY
# ----------------------------------------------------------------------

def classify(line0: Line, line1: Line) -> ExistenceResult:
    """
    Decide whether two lines intersect and how many points they share.

    Returns:
        ExistenceResult with num_intersections 0, 1 or
        UNBOUNDED_INTERSECTIONS (same line).
    """
    _, o0, d0, o1, d1 = _common_arrays(line0, line1)

    if not is_zero(dot_perp(d0, d1)):
        # not parallel
        return ExistenceResult(intersect=True, num_intersections=1)

    # parallel; test the unit origin difference
    diff = normalize(o1 - o0)
    if not is_zero(dot_perp(diff, d1)):
        # parallel but distinct
        return ExistenceResult(intersect=False, num_intersections=0)

    return ExistenceResult(intersect=True, num_intersections=UNBOUNDED_INTERSECTIONS)


# ----------------------------------------------------------------------
#  CONSTRUCTION QUERY
# ----------------------------------------------------------------------

def intersect(line0: Line, line1: Line) -> ConstructionResult:
    """
    Classify two lines and compute their intersection set.

    Single point:
        line0_parameter = (s0, s0), line1_parameter = (s1, s1),
        point = line0.origin + s0 * line0.direction
    Same line:
        both parameters = (-maxT, +maxT), maxT = largest finite scalar;
        point is left at zero and is not meaningful
    No intersection:
        parameters and point are left at zero and are not meaningful

    The parallel-distinct test uses dot_perp(Q, D1) on the raw origin
    difference, unlike classify(), so the two queries can disagree for
    nearly coincident lines at extreme scales.
    """
    dtype, o0, d0, o1, d1 = _common_arrays(line0, line1)

    q = o1 - o0
    d0_dot_perp_d1 = dot_perp(d0, d1)
    zero = dtype.type(0)

    if not is_zero(d0_dot_perp_d1):
        # not parallel
        s0 = dot_perp(q, d1) / d0_dot_perp_d1
        s1 = dot_perp(q, d0) / d0_dot_perp_d1
        return ConstructionResult(
            intersect=True,
            num_intersections=1,
            line0_parameter=(s0, s0),
            line1_parameter=(s1, s1),
            point=o0 + s0 * d0,
        )

    q_dot_perp_d1 = dot_perp(q, d1)
    if not is_zero(abs(q_dot_perp_d1)):
        # parallel but distinct
        return ConstructionResult(
            intersect=False,
            num_intersections=0,
            line0_parameter=(zero, zero),
            line1_parameter=(zero, zero),
            point=zero_vector(dtype),
        )

    max_t = max_scalar(dtype)
    return ConstructionResult(
        intersect=True,
        num_intersections=UNBOUNDED_INTERSECTIONS,
        line0_parameter=(-max_t, max_t),
        line1_parameter=(-max_t, max_t),
        point=zero_vector(dtype),
    )
