import unittest
import numpy as np
from geom3d.point import Point3


class TestPoint3(unittest.TestCase):
    def test_init(self):
        p = Point3(1, 2, 3)
        assert p.dim == 3
        assert (p.x, p.y, p.z) == (1.0, 2.0, 3.0)
        np.testing.assert_array_equal(Point3([1, 2, 3]), p)

    def test_bad_shape(self):
        with self.assertRaises(ValueError):
            Point3(1, 2)
        with self.assertRaises(ValueError):
            Point3([[1, 2, 3]])

    def test_read_only(self):
        p = Point3(1, 2, 3)
        with self.assertRaises(ValueError):
            p[0] = 5

    def test_source_not_aliased(self):
        a = np.array([1.0, 2.0, 3.0])
        p = Point3(a)
        a[0] = 9.0
        assert p.x == 1.0

    def test_length_and_normalized(self):
        p = Point3(3, 4, 0)
        assert p.length == 5.0
        np.testing.assert_allclose(p.normalized, [0.6, 0.8, 0.0])
        assert p.distance((3, 4, 12)) == 12.0

    def test_zero_normalized(self):
        np.testing.assert_array_equal(Point3(0, 0, 0).normalized, [0, 0, 0])

    def test_equality(self):
        p = Point3(1, 2, 3)
        assert p.equals((1, 2, 3))
        assert not p.equals((1, 2, 3 + 1e-12))
        assert p.epsilon_equal((1, 2, 3 + 1e-12))
        assert not p.epsilon_equal((1, 2, 3.1))
        assert p.epsilon_equal((1, 2, 3.1), tol=0.2)

    def test_hash(self):
        assert hash(Point3(1, 2, 3)) == hash(Point3(1.0, 2.0, 3.0))
        assert hash(Point3(1, 2, 3)) != hash(Point3(3, 2, 1))

    def test_signed_zero(self):
        p, q = Point3(0.0, 0.0, 0.0), Point3(-0.0, 0.0, -0.0)
        assert p.equals(q)
        assert hash(p) == hash(q)
        assert not np.signbit(q).any()

    def test_tuple_as_dict_key(self):
        lookup = {tuple(Point3(1, 2, 3)): "a"}
        assert lookup[tuple(Point3(1.0, 2.0, 3.0))] == "a"

    def test_repr(self):
        assert repr(Point3(1, 2, 3)) == "Point3(1.0, 2.0, 3.0)"
