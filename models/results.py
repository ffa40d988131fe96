from dataclasses import dataclass, field
from typing import Optional, Tuple

import numpy as np

from config import UNBOUNDED_INTERSECTIONS


@dataclass(frozen=True)
class ExistenceResult:
    """
    Classification of a pair of lines:

        no intersection    →  intersect=False, num_intersections=0
        single point       →  intersect=True,  num_intersections=1
        same line          →  intersect=True,  num_intersections=UNBOUNDED_INTERSECTIONS
    """

    intersect: bool = False
    num_intersections: int = 0

    @property
    def is_point(self) -> bool:
        return self.num_intersections == 1

    @property
    def is_unbounded(self) -> bool:
        return self.num_intersections == UNBOUNDED_INTERSECTIONS


@dataclass(frozen=True)
class ConstructionResult:
    """
    Classification plus the intersection set.

    Single point (parameters s0 for line0, s1 for line1):
        line0_parameter = (s0, s0)
        line1_parameter = (s1, s1)
        point = line0.origin + s0 * line0.direction
              = line1.origin + s1 * line1.direction

    Same line (maxT = largest finite value of the scalar type):
        line0_parameter = (-maxT, +maxT)
        line1_parameter = (-maxT, +maxT)
        point is invalid

    No intersection: parameters and point are invalid.
    """

    intersect: bool = False
    num_intersections: int = 0
    line0_parameter: Tuple[float, float] = (0.0, 0.0)
    line1_parameter: Tuple[float, float] = (0.0, 0.0)
    point: Optional[np.ndarray] = field(default=None, compare=False)

    def __post_init__(self):
        point = np.zeros(2) if self.point is None else np.array(self.point)
        # read-only, like the arrays of Line
        point.setflags(write=False)
        # frozen, so the point has to be set through object.__setattr__
        object.__setattr__(self, "point", point)

    @property
    def is_point(self) -> bool:
        return self.num_intersections == 1

    @property
    def is_unbounded(self) -> bool:
        return self.num_intersections == UNBOUNDED_INTERSECTIONS
