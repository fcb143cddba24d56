from __future__ import annotations
from numpy.typing import ArrayLike

import numpy as np
from .array import Array
from .base import Geometry


class AABB(Geometry):
    """Axis-aligned bounding box in n-dimensions.

    Boxes grow in place through `contain`. A box built without arguments is the
    empty sentinel: its min is +inf and its max is -inf, so containing any point
    collapses it onto that point.
    """

    def __init__(self, *args, dim: int = 3):
        if args == ():
            infs = np.full(dim, np.inf)
            args = (infs, -infs)

        try:
            min, max = args
        except ValueError:
            min, max = args[0]

        self.min = Array(min, dtype=float)
        self.max = Array(max, dtype=float)

        if not self.min.shape == self.max.shape:
            raise ValueError("min and max must have the same shape")

    @classmethod
    def empty(cls, dim: int = 3) -> AABB:
        return cls(dim=dim)

    @classmethod
    def from_point(cls, point: ArrayLike) -> AABB:
        """A degenerate box holding a single point."""
        return cls(point, point)

    def __getitem__(self, i):
        return (self.min, self.max)[i]  # allows: min, max = AABB

    def __array__(self, dtype=None, copy=None):
        return np.array((self.min, self.max), dtype=dtype)

    def __eq__(self, other) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return bool(np.array_equal(self.min, other.min) and np.array_equal(self.max, other.max))

    def __hash__(self):
        return hash((hash(self.min), hash(self.max)))

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(min={self.min}, max={self.max})>"

    @property
    def dim(self):
        return len(self.min)

    @property
    def is_empty(self) -> bool:
        return bool(np.any(self.min > self.max))

    def contain(self, point: ArrayLike) -> AABB:
        """Grow the box in place so that it contains `point`."""
        point = np.asarray(point, dtype=float)
        if point.shape != self.min.shape:
            raise ValueError(f"Expected a point of shape {self.min.shape}, got {point.shape}")
        self.min[:] = np.minimum(self.min, point)
        self.max[:] = np.maximum(self.max, point)
        return self

