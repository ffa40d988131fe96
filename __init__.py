"""
Line Intersection Package

Exact intersection queries for pairs of infinite 2D lines, including:

- Line model (origin + direction)
- Existence query (none / one point / same line)
- Construction query (parameters and intersection point)
- All-pairs helpers over a list of lines
"""
__all__ = [
    "config",
    "models",
    "queries",
    "utils",
]
