"""
All-pairs intersection over a collection of lines.

This module provides:
    • find_intersections(lines, include_coincident)
    • count_by_kind(lines)
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence

from models.line import Line
from models.results import ConstructionResult
from queries.line_intersection import classify, intersect
from config import get_active_params


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineIntersection:
    """Construction result for the pair (lines[index0], lines[index1])."""

    index0: int
    index1: int
    result: ConstructionResult


def _log_batch(lines: Sequence[Line], what: str):
    params = get_active_params()
    n = len(lines)
    if n > params["LARGE_BATCH_SIZE"]:
        logger.info("%s over %d lines (%d pairs)", what, n, n * (n - 1) // 2)


# ----------------------------------------------------------------------
# 1. INTERSECTION POINTS
# ----------------------------------------------------------------------

def find_intersections(
    lines: Sequence[Line],
    include_coincident: bool = False,
) -> List[LineIntersection]:
    """
    Run the construction query on every pair i < j.

    Parameters
    ----------
    lines : sequence of Line
    include_coincident : bool
        Also report pairs that are the same line. Their result carries
        the unbounded parameter interval and no point.

    Returns
    -------
    list[LineIntersection]
        One entry per intersecting pair, ordered by (index0, index1).
    """
    _log_batch(lines, "find_intersections")

    found: List[LineIntersection] = []

    for i in range(len(lines)):
        for j in range(i + 1, len(lines)):
            res = intersect(lines[i], lines[j])
            if not res.intersect:
                continue
            if res.is_unbounded and not include_coincident:
                continue
            found.append(LineIntersection(i, j, res))

    logger.debug("find_intersections: %d intersecting pairs among %d lines", len(found), len(lines))
    return found


# ----------------------------------------------------------------------
# 2. CLASSIFICATION COUNTS
# ----------------------------------------------------------------------

def count_by_kind(lines: Sequence[Line]) -> Dict[str, int]:
    """
    Classify every pair i < j with the existence query.

    Returns:
        {"point": n1, "coincident": n2, "parallel": n3}
    """
    _log_batch(lines, "count_by_kind")

    counts = {"point": 0, "coincident": 0, "parallel": 0}

    for i in range(len(lines)):
        for j in range(i + 1, len(lines)):
            res = classify(lines[i], lines[j])
            if res.is_point:
                counts["point"] += 1
            elif res.is_unbounded:
                counts["coincident"] += 1
            else:
                counts["parallel"] += 1

    logger.debug("count_by_kind: %s", counts)
    return counts
