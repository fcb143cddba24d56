from __future__ import annotations
import logging
from typing import Iterable, Iterator
from numpy.typing import ArrayLike

import numpy as np
from .array import Array
from .bounds import AABB
from .cache import revision_cached
from .point import Point3, as_point3
from .segment import Segment3
from .utils import ZERO_TOLERANCE, as_points, unitize

log = logging.getLogger(__name__)


class PolyLineStateError(ValueError):
    """The polyline's current vertices do not allow the requested operation."""


def _collect(points: Iterable, allow_duplicates: bool = False) -> tuple[list[Point3], int]:
    """Single left-to-right pass that drops points equal to the last accepted one.
    Returns the accepted points and how many were dropped."""
    accepted: list[Point3] = []
    dropped = 0
    for point in points:
        point = as_point3(point)
        if allow_duplicates or not accepted or not accepted[-1].equals(point):
            accepted.append(point)
        else:
            dropped += 1
    return accepted, dropped


class PolyLine3:
    """An ordered, mutable sequence of 3D vertices.

    Vertex ``i`` connects to vertex ``i + 1``. Unless explicitly allowed when
    loading, two adjacent vertices are never exactly equal at the moment one of
    them is added: appends and inserts that would create such a pair are
    silently dropped. Removing vertices or assigning by index is not checked.

    Every mutation increments `revision`, so values derived from the polyline
    elsewhere can record the revision they were computed at and recompute on
    mismatch. Iterating over the vertices or `segments` while the polyline is
    mutated raises ``RuntimeError``.

    Instances are not synchronized; sharing one between threads requires
    external locking.

    Parameters
    ----------
    points : `PolyLine3` or iterable of points (optional)
        Another polyline to copy, or points to load in order.
    allow_duplicates : `bool`
        Keep adjacent duplicate points while loading. Ignored when copying.

    >>> pl = PolyLine3([(0, 0, 0), (0, 0, 0), (3, 0, 0), (3, 4, 0)])
    >>> len(pl), pl.length
    (3, 7.0)
    """

    def __init__(self, points: PolyLine3 | Iterable[ArrayLike] | None = None, allow_duplicates: bool = False):
        if isinstance(points, PolyLine3):
            # points are read-only, so a new list is an independent copy
            self._vertices = list(points._vertices)
        elif points is not None:
            self._vertices, dropped = _collect(points, allow_duplicates)
            if dropped:
                log.debug(f"dropped {dropped} adjacent duplicate points while loading")
        else:
            self._vertices = []
        self._revision = 0
        self._domain = (0.0, float(len(self._vertices) - 1))

    @classmethod
    def from_coordinates(cls, coords: ArrayLike, allow_duplicates: bool = False) -> PolyLine3:
        """Load from raw coordinates, either flat ``[x0, y0, z0, x1, ...]`` or shaped (n, 3)."""
        return cls(as_points(coords), allow_duplicates=allow_duplicates)

    def copy(self) -> PolyLine3:
        return type(self)(self)

    def __repr__(self) -> str:
        closed = bool(self._vertices) and self.is_closed()
        return f"<{type(self).__name__}(n_vertices={len(self)}, closed={closed}, revision={self._revision})>"

    def _index(self, i: int, size: int | None = None) -> int:
        size = len(self._vertices) if size is None else size
        if not 0 <= i < size:
            raise IndexError(f"vertex index {i} out of range for {len(self._vertices)} vertices")
        return i

    def _walk(self, stop: int) -> Iterator[int]:
        revision = self._revision
        for i in range(len(self._vertices) - stop):
            yield i
            if self._revision != revision:
                raise RuntimeError(f"{type(self).__name__} changed during iteration")

    def __len__(self) -> int:
        return len(self._vertices)

    def __getitem__(self, i: int) -> Point3:
        return self._vertices[self._index(i)]

    def __setitem__(self, i: int, point: ArrayLike):
        self._vertices[self._index(i)] = as_point3(point)
        self._revision += 1

    def __iter__(self) -> Iterator[Point3]:
        return (self._vertices[i] for i in self._walk(0))

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def vertices(self) -> Array:
        """Read-only (n, 3) copy of the vertices."""
        return Array(np.reshape(self._vertices, (-1, 3)), dtype=float, mutable=False)

    @property
    def revision(self) -> int:
        """Counter incremented on every mutation. Starts at 0 and never decreases."""
        return self._revision

    timestamp = revision

    @property
    def domain(self) -> tuple[float, float]:
        """Advisory (start, end) parameter range. Not kept in sync with the vertices."""
        return self._domain

    @domain.setter
    def domain(self, value: tuple[float, float]):
        start, end = value
        self.set_domain(start, end)

    def set_domain(self, start: float, end: float):
        self._domain = (start, end)
        self._revision += 1

    @property
    def start(self) -> Point3:
        if not self._vertices:
            raise PolyLineStateError("empty polyline has no start vertex")
        return self._vertices[0]

    @property
    def end(self) -> Point3:
        if not self._vertices:
            raise PolyLineStateError("empty polyline has no end vertex")
        return self._vertices[-1]

    def append_vertex(self, *point) -> bool:
        """Append a vertex given as one point or as ``x, y, z``.

        Returns ``False`` without changing anything if the point equals the
        current last vertex.
        """
        point = as_point3(point[0] if len(point) == 1 else point)
        if self._vertices and self._vertices[-1].equals(point):
            log.debug(f"append of {point!r} dropped as a duplicate of the last vertex")
            return False
        self._vertices.append(point)
        self._revision += 1
        return True

    def insert_vertex(self, i: int, point: ArrayLike) -> bool:
        """Insert a vertex before index `i`; ``i == len(self)`` appends.

        Returns ``False`` without changing anything if the point equals either
        of its would-be neighbours.
        """
        i = self._index(i, len(self._vertices) + 1)
        point = as_point3(point)
        left = i > 0 and self._vertices[i - 1].equals(point)
        right = i < len(self._vertices) and self._vertices[i].equals(point)
        if left or right:
            log.debug(f"insert of {point!r} at {i} dropped as a duplicate of a neighbour")
            return False
        self._vertices.insert(i, point)
        self._revision += 1
        return True

    def remove_vertex(self, i: int):
        """Remove the vertex at `i`. Neighbours that become equal are left as they are."""
        del self._vertices[self._index(i)]
        self._revision += 1

    def reverse(self):
        """Reverse the vertex order in place. The domain is left unchanged."""
        self._vertices.reverse()
        self._revision += 1

    def reorder_vertices(self, new_start: int):
        """Rotate a closed polyline so that it starts at vertex `new_start`.

        The rotated sequence is rebuilt with adjacent duplicates dropped (the old
        closing vertex usually lands next to its twin) and closed again on the new
        first vertex, so the vertex count can change.

        Raises
        ------
        PolyLineStateError
            If the polyline is not closed.
        """
        if not self.is_closed():
            raise PolyLineStateError("polyline must be closed to reorder vertices")
        # new_start == len(self) rotates by zero
        new_start = self._index(new_start, len(self._vertices) + 1)

        rotated = self._vertices[new_start:] + self._vertices[:new_start]
        vertices, _ = _collect(rotated)
        if not vertices[0].epsilon_equal(vertices[-1]):
            vertices.append(vertices[0])

        if len(vertices) != len(self._vertices):
            log.debug(f"reordering changed the vertex count from {len(self._vertices)} to {len(vertices)}")
        self._vertices = vertices
        self._revision += 1

    def is_closed(self, tol: float = ZERO_TOLERANCE) -> bool:
        """`True` if the first and last vertices are equal within `tol`."""
        if not self._vertices:
            raise PolyLineStateError("closure is undefined for an empty polyline")
        return self._vertices[0].epsilon_equal(self._vertices[-1], tol)

    def close(self):
        """Append a copy of the first vertex unless the polyline is already closed."""
        if not self.is_closed():
            self._vertices.append(self._vertices[0])
            self._revision += 1

    def tangent(self, i: int) -> Point3:
        """Unit tangent at vertex `i`.

        Forward difference at the first vertex, backward difference at the last and
        central difference in between. A zero difference gives the zero vector.
        """
        if len(self._vertices) < 2:
            raise PolyLineStateError(f"tangent needs at least 2 vertices, polyline has {len(self._vertices)}")
        i = self._index(i)
        v = self._vertices
        if i == 0:
            d = v[1] - v[0]
        elif i == len(v) - 1:
            d = v[-1] - v[-2]
        else:
            d = v[i + 1] - v[i - 1]
        tangent = Point3(d).normalized
        if not tangent.any():
            log.debug(f"degenerate tangent at vertex {i}: neighbouring vertices coincide")
        return tangent

    @revision_cached
    def tangents(self) -> Array:
        """(n, 3) unit tangents at every vertex, computed as in `tangent`."""
        if len(self._vertices) < 2:
            raise PolyLineStateError(f"tangents need at least 2 vertices, polyline has {len(self._vertices)}")
        v = np.reshape(self._vertices, (-1, 3))
        d = np.empty_like(v)
        d[0] = v[1] - v[0]
        d[-1] = v[-1] - v[-2]
        d[1:-1] = v[2:] - v[:-2]
        return Array(unitize(d), mutable=False)

    def bounds(self) -> AABB:
        """Axis-aligned bounds of the vertices; the empty box if there are none."""
        if not self._vertices:
            return AABB.empty()
        box = AABB.from_point(self._vertices[0])
        for point in self._vertices[1:]:
            box.contain(point)
        return box

    @property
    def aabb(self) -> AABB:
        """`AABB` of the vertices."""
        return self.bounds()

    def segments(self) -> Iterator[Segment3]:
        """Lazily yield the segment between each pair of consecutive vertices."""
        return (Segment3(self._vertices[i], self._vertices[i + 1]) for i in self._walk(1))

    @revision_cached
    def lengths(self) -> Array:
        """The length of each segment in the polyline."""
        if len(self._vertices) < 2:
            return Array(np.zeros(0), mutable=False)
        v = np.reshape(self._vertices, (-1, 3))
        return Array(np.linalg.norm(np.diff(v, axis=0), axis=1), mutable=False)

    @property
    def length(self) -> float:
        """The total length of the polyline."""
        return float(np.sum(self.lengths))

    def total_length(self) -> float:
        return self.length
