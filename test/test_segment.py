import unittest
import numpy as np
from geom3d.point import Point3
from geom3d.segment import Segment3


class TestSegment3(unittest.TestCase):
    def test_init(self):
        s = Segment3((0, 0, 0), Point3(2, 0, 0))
        assert isinstance(s.p0, Point3)
        assert s.dim == 3
        p0, p1 = s
        assert p0.equals((0, 0, 0)) and p1.equals((2, 0, 0))

    def test_queries(self):
        s = Segment3((0, 0, 0), (0, 4, 0))
        assert s.length == 4.0
        assert s.extent == 2.0
        np.testing.assert_array_equal(s.center, [0, 2, 0])
        np.testing.assert_array_equal(s.direction, [0, 1, 0])
        np.testing.assert_array_equal(s.point_at(0.25), [0, 1, 0])

    def test_degenerate_direction(self):
        s = Segment3((1, 1, 1), (1, 1, 1))
        np.testing.assert_array_equal(s.direction, [0, 0, 0])

    def test_equality(self):
        assert Segment3((0, 0, 0), (1, 1, 1)) == Segment3((0, 0, 0), (1, 1, 1))
        assert Segment3((0, 0, 0), (1, 1, 1)) != Segment3((1, 1, 1), (0, 0, 0))
        assert hash(Segment3((0, 0, 0), (1, 1, 1))) == hash(Segment3((0, 0, 0), (1, 1, 1)))

    def test_signed_zero(self):
        a = Segment3((0.0, 0, 0), (1, 1, 1))
        b = Segment3((-0.0, 0, 0), (1, 1, 1))
        assert a == b
        assert hash(a) == hash(b)

    def test_dict_key(self):
        lookup = {Segment3((0, 0, 0), (1, 1, 1)): "a"}
        assert lookup[Segment3((-0.0, 0, 0), (1.0, 1.0, 1.0))] == "a"
