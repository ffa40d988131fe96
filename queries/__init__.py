"""
Queries Package

Contains the line intersection queries:
- Existence (classification only)
- Construction (parameters and point)
- All-pairs helpers over a list of lines
"""

from .line_intersection import classify, intersect
from .pairwise import LineIntersection, find_intersections, count_by_kind

__all__ = [
    "classify",
    "intersect",
    "LineIntersection",
    "find_intersections",
    "count_by_kind",
]
