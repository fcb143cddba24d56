from __future__ import annotations
from numpy.typing import ArrayLike

import numpy as np
from .base import Geometry
from .point import Point3, as_point3


class Segment3(Geometry):
    """A straight line segment between two 3D points."""

    def __init__(self, p0: ArrayLike, p1: ArrayLike):
        self.p0 = as_point3(p0)
        self.p1 = as_point3(p1)

    def __iter__(self):
        yield self.p0
        yield self.p1

    def __eq__(self, other) -> bool:
        if not isinstance(other, Segment3):
            return NotImplemented
        return self.p0.equals(other.p0) and self.p1.equals(other.p1)

    def __hash__(self):
        return hash((hash(self.p0), hash(self.p1)))

    def __repr__(self) -> str:
        return f"<{type(self).__name__}({self.p0!r}, {self.p1!r})>"

    @property
    def dim(self):
        return 3

    @property
    def center(self) -> Point3:
        return Point3((self.p0 + self.p1) / 2)

    @property
    def length(self) -> float:
        return self.p0.distance(self.p1)

    @property
    def extent(self) -> float:
        """Half the length of the segment."""
        return self.length / 2

    @property
    def direction(self) -> Point3:
        """Unit vector from p0 to p1, zero for a degenerate segment."""
        return Point3(self.p1 - self.p0).normalized

    def point_at(self, t: float) -> Point3:
        """Linear interpolation between the endpoints, `t` in [0, 1]."""
        return Point3(self.p0 + (self.p1 - self.p0) * t)
