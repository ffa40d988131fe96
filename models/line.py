import itertools
import logging

import numpy as np

from utils.vector import as_vector, dot_perp, is_zero, length


logger = logging.getLogger(__name__)


class Line:
    """
    Infinite 2D line given by an origin point and a direction vector.

    Supports:
      - construction from origin/direction or from two points
      - evaluation of a point from its parameter
      - projection of points onto the line (point and parameter)
      - distance from a point to the line

    The direction does not need unit length. A zero direction is a
    precondition violation: it is logged, not rejected, and the
    intersection queries give unspecified results for such a line.
    """

    # shared by all threads; next() hands out each id once
    id_num = itertools.count(1)

    # ------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------
    def __init__(self, origin, direction, dtype=None):
        """
        origin:    [x, y]
        direction: [dx, dy]
        dtype:     numpy floating type; inferred from numpy inputs when omitted
        """
        self.id = next(Line.id_num)

        if dtype is None:
            dtype = _infer_scalar_type(origin, direction)

        self.origin = as_vector(origin, dtype)
        self.direction = as_vector(direction, dtype)

        # read-only
        self.origin.setflags(write=False)
        self.direction.setflags(write=False)

        if is_zero(self.direction[0]) and is_zero(self.direction[1]):
            logger.warning("Line %d has a zero direction vector", self.id)

    @classmethod
    def from_points(cls, p0, p1, dtype=None):
        """
        Line through p0 and p1, with origin p0 and direction p1 - p0.
        """
        if dtype is None:
            dtype = _infer_scalar_type(p0, p1)
        a = as_vector(p0, dtype)
        b = as_vector(p1, dtype)
        return cls(a, b - a, dtype)

    @property
    def dtype(self) -> np.dtype:
        return self.origin.dtype

    # ------------------------------------------------------------
    # Evaluation & projection
    # ------------------------------------------------------------
    def point_at(self, t):
        """origin + t * direction"""
        return self.origin + self.dtype.type(t) * self.direction

    def parameter_of(self, point):
        """
        Parameter of the orthogonal projection of point onto the line.

        Returns 0 for a degenerate (zero-direction) line.
        """
        p = as_vector(point, self.dtype)
        d_len = length(self.direction)

        if is_zero(d_len):  # degenerate line
            return self.dtype.type(0)

        # project onto the unit direction; d . d underflows for tiny directions
        unit = self.direction / d_len
        diff = p - self.origin
        return (diff[0] * unit[0] + diff[1] * unit[1]) / d_len

    def closest_point(self, point):
        """
        Projection of point onto the infinite line.
        """
        return self.point_at(self.parameter_of(point))

    def distance_from_point(self, point):
        """
        Distance from point to the infinite line, |perpDot(p - origin, d)| / |d|.

        Falls back to the distance to the origin for a degenerate line.
        """
        p = as_vector(point, self.dtype)
        diff = p - self.origin
        d_len = length(self.direction)

        if is_zero(d_len):
            return length(diff)

        return abs(dot_perp(diff, self.direction / d_len))

    def contains(self, point) -> bool:
        """
        Exact membership test: perpDot(p - origin, direction) == 0.
        """
        p = as_vector(point, self.dtype)
        return is_zero(dot_perp(p - self.origin, self.direction))

    # ------------------------------------------------------------
    # Repr
    # ------------------------------------------------------------
    def __repr__(self):
        return (
            f"Line(id={self.id}, origin={self.origin.tolist()}, "
            f"direction={self.direction.tolist()}, dtype={self.dtype})"
        )


def _infer_scalar_type(*values):
    """
    Common floating dtype of numpy inputs, or None to use the default.
    """
    dtypes = [v.dtype for v in values if isinstance(v, np.ndarray)]
    if not dtypes:
        return None
    common = np.result_type(*dtypes)
    if not np.issubdtype(common, np.floating):
        return None
    return common
