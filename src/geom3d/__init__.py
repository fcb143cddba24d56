from .array import Array
from .bounds import AABB
from .point import Point3
from .segment import Segment3
from .polyline import PolyLine3, PolyLineStateError
from .utils import ZERO_TOLERANCE

__all__ = [
    "Array",
    "AABB",
    "Point3",
    "Segment3",
    "PolyLine3",
    "PolyLineStateError",
    "ZERO_TOLERANCE",
]
