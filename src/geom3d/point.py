from __future__ import annotations
from numpy.typing import ArrayLike

import numpy as np
from .array import Array
from .base import Geometry
from .utils import ZERO_TOLERANCE, unitize


class Point3(Array, Geometry):
    """A read-only point (or vector) in 3D space.

    >>> p = Point3(1, 2, 3)
    >>> p.x, p.length
    (1.0, 3.7416573867739413)
    """

    def __new__(cls, *coords) -> Point3:
        if len(coords) == 1:
            coords = coords[0]
        # adding 0.0 copies and turns -0.0 into 0.0, keeping hashes in line with `equals`
        self = (np.asarray(coords, dtype=np.float64) + 0.0).view(cls)
        if self.shape != (3,):
            raise ValueError(f"Point3 requires exactly 3 coordinates, got shape {self.shape}")
        self.flags.writeable = False
        return self

    def __repr__(self) -> str:
        if self.shape != (3,):  # arithmetic results share the type
            return repr(self.view(np.ndarray))
        x, y, z = self.tolist()
        return f"{type(self).__name__}({x}, {y}, {z})"

    @property
    def dim(self):
        return 3

    @property
    def x(self) -> float:
        return float(self[0])

    @property
    def y(self) -> float:
        return float(self[1])

    @property
    def z(self) -> float:
        return float(self[2])

    @property
    def length(self) -> float:
        return float(np.linalg.norm(self))

    @property
    def normalized(self) -> Point3:
        """Unit vector in the same direction. The zero vector maps to itself."""
        return Point3(unitize(self.view(np.ndarray)))

    def distance(self, other: ArrayLike) -> float:
        return float(np.linalg.norm(np.subtract(other, self)))

    def equals(self, other: ArrayLike) -> bool:
        """Exact value equality."""
        return bool(np.array_equal(self, other))

    def epsilon_equal(self, other: ArrayLike, tol: float = ZERO_TOLERANCE) -> bool:
        """Equality within `tol` on every component."""
        return bool(np.all(np.abs(np.subtract(self, other)) <= tol))


def as_point3(value) -> Point3:
    """`value` itself if it already is a read-only `Point3`, otherwise a new one.

    Arithmetic on points yields writable arrays of the same type, which must not be
    stored as they are.
    """
    if isinstance(value, Point3) and not value.flags.writeable and value.shape == (3,):
        return value
    return Point3(value)
