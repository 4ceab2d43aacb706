import math
import unittest

from sliding_ruler.geometry import (
    Bounds, LayoutDirection, approximated, clamp, directional_value, nearest_bound, next_odd, previous_even,
)


class TestGeometry(unittest.TestCase):
    def test_clamp(self):
        self.assertEqual(clamp(5, 0, 3), 3)
        self.assertEqual(clamp(-1, 0, 3), 0)
        self.assertEqual(clamp(2, 0, 3), 2)
        self.assertEqual(clamp(1e9, -math.inf, math.inf), 1e9)

    def test_clamp_is_idempotent(self):
        xs = [-math.inf, -1e9, -3.5, -0.0, 0, 0.25, 7, 1e9, math.inf]
        ranges = [(0, 5), (-2.5, -2.5), (-math.inf, 0), (1, math.inf), (-math.inf, math.inf), (-1e6, 1e-6)]
        for lo, hi in ranges:
            for x in xs:
                once = clamp(x, lo, hi)
                self.assertEqual(clamp(once, lo, hi), once, (x, lo, hi))
                self.assertTrue(lo <= once <= hi)
                self.assertEqual(Bounds(lo, hi).clamp(once), once)

    def test_clamp_returns_positive_zero(self):
        self.assertEqual(math.copysign(1, clamp(-0.0, 0.0, 5.0)), 1)
        self.assertEqual(math.copysign(1, clamp(-3, 0.0, 5.0)), 1)

    def test_bounds(self):
        bounds = Bounds(0, 10)
        self.assertTrue(bounds.contains(0))
        self.assertTrue(bounds.contains(10))
        self.assertFalse(bounds.contains(10.001))
        self.assertTrue(bounds.is_bound(10))
        self.assertFalse(bounds.is_bound(5))
        self.assertEqual(bounds.clamp(12), 10)

    def test_nearest_bound(self):
        self.assertEqual(nearest_bound(3, (0, 10)), 0)
        self.assertEqual(nearest_bound(7, (0, 10)), 10)
        self.assertEqual(nearest_bound(5, (0, 10)), 0)
        self.assertEqual(Bounds(-300, 0).nearest_bound(12), 0)

    def test_directional_value(self):
        self.assertEqual(directional_value(4, LayoutDirection.LEFT_TO_RIGHT), 4)
        self.assertEqual(directional_value(4, LayoutDirection.RIGHT_TO_LEFT), -4)

    def test_approximated(self):
        self.assertEqual(approximated(0.1 + 0.2), 0.3)
        self.assertEqual(math.floor(approximated(2.9999999999)), 3)
        self.assertEqual(approximated(math.inf), math.inf)
        self.assertTrue(math.isnan(approximated(math.nan)))

    def test_parity_helpers(self):
        self.assertEqual(next_odd(4), 5)
        self.assertEqual(next_odd(5), 5)
        self.assertEqual(previous_even(7), 6)
        self.assertEqual(previous_even(6), 6)


if __name__ == '__main__':
    unittest.main()
