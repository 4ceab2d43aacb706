import math
import unittest

from sliding_ruler.config import Mark, RulerConfig, RulerStyle
from sliding_ruler.geometry import Bounds, LayoutDirection


class TestRulerConfig(unittest.TestCase):
    def test_defaults(self):
        config = RulerConfig()
        self.assertEqual(config.bounds, Bounds(-math.inf, math.inf))
        self.assertEqual(config.step, 1.0)
        self.assertEqual(config.snap, Mark.NONE)
        self.assertEqual(config.tick, Mark.NONE)
        self.assertEqual(config.flick_velocity_threshold, 90.0)
        self.assertEqual(config.deceleration_rate, 0.9972)
        self.assertEqual(config.snap_tie_break, "upper")

    def test_coercion(self):
        config = RulerConfig(bounds=(0, 5), snap="half", tick="unit", layout_direction="rtl")
        self.assertIsInstance(config.bounds, Bounds)
        self.assertEqual(config.bounds.upper, 5.0)
        self.assertEqual(config.snap, Mark.HALF)
        self.assertEqual(config.tick, Mark.UNIT)
        self.assertEqual(config.layout_direction, LayoutDirection.RIGHT_TO_LEFT)

    def test_invalid_values(self):
        with self.assertRaises(ValueError):
            RulerConfig(step=0)
        with self.assertRaises(ValueError):
            RulerConfig(bounds=(5, 0))
        with self.assertRaises(ValueError):
            RulerConfig(bounds=(math.nan, 0))
        with self.assertRaises(ValueError):
            RulerConfig(snap="quarter")
        with self.assertRaises(ValueError):
            RulerConfig(deceleration_rate=1.5)
        with self.assertRaises(ValueError):
            RulerConfig(snap_tie_break="even")
        with self.assertRaises(ValueError):
            RulerConfig(cell_overflow=-1)


class TestRulerStyle(unittest.TestCase):
    def test_invalid_values(self):
        with self.assertRaises(ValueError):
            RulerStyle(cell_width=0)
        with self.assertRaises(ValueError):
            RulerStyle(fractions=0)


if __name__ == '__main__':
    unittest.main()
