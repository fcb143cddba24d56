import unittest
import numpy as np
from geom3d.bounds import AABB


class TestAABB(unittest.TestCase):
    def test_empty(self):
        box = AABB()
        assert box.dim == 3
        assert box.is_empty
        assert box == AABB.empty()

    def test_from_point(self):
        box = AABB.from_point((1, 2, 3))
        assert not box.is_empty
        np.testing.assert_array_equal(box.min, [1, 2, 3])
        np.testing.assert_array_equal(box.max, [1, 2, 3])

    def test_contain(self):
        box = AABB.from_point((0, 0, 0))
        assert box.contain((1, 2, -1)) is box
        np.testing.assert_array_equal(box.min, [0, 0, -1])
        np.testing.assert_array_equal(box.max, [1, 2, 0])

    def test_contain_empty(self):
        box = AABB.empty().contain((4, 5, 6))
        assert box == AABB((4, 5, 6), (4, 5, 6))

    def test_contain_bad_shape(self):
        with self.assertRaises(ValueError):
            AABB.empty().contain((1, 2))

    def test_contain_updates_hash(self):
        box = AABB.from_point((0, 0, 0))
        before = hash(box)
        box.contain((1, 1, 1))
        assert hash(box) != before
        assert hash(box) == hash(AABB((0, 0, 0), (1, 1, 1)))

    def test_unpack(self):
        lo, hi = AABB((0, 0, 0), (1, 1, 1))
        np.testing.assert_array_equal(lo, [0, 0, 0])
        np.testing.assert_array_equal(hi, [1, 1, 1])
        assert AABB((lo, hi)) == AABB(lo, hi)
        np.testing.assert_array_equal(np.asarray(AABB(lo, hi)), [lo, hi])

    def test_mismatched_shapes(self):
        with self.assertRaises(ValueError):
            AABB((0, 0), (1, 1, 1))
