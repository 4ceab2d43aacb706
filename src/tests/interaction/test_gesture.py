import unittest

from sliding_ruler.config import Mark, RulerStyle
from sliding_ruler.geometry import Bounds
from sliding_ruler.interaction import (
    ControllerState, DragGestureValue, GesturePhase, is_horizontal_drag, snap_interval, tick_crossed, tick_granularity,
)


class TestDragGestureValue(unittest.TestCase):
    def test_from_locations_keeps_horizontal_translation(self):
        gesture = DragGestureValue.from_locations(GesturePhase.CHANGED, (100, 40), (70, 55), velocity=-300)
        self.assertEqual(gesture.translation, -30)
        self.assertEqual(gesture.velocity, -300)
        self.assertEqual(gesture.location, (70, 55))

    def test_horizontal_drag(self):
        self.assertTrue(is_horizontal_drag(300, -100))
        self.assertFalse(is_horizontal_drag(50, 200))
        self.assertFalse(is_horizontal_drag(0, 0))


class TestMarkHelpers(unittest.TestCase):
    def test_tick_granularity(self):
        style = RulerStyle(cell_width=60, fractions=10)
        self.assertIsNone(tick_granularity(Mark.NONE, style))
        self.assertEqual(tick_granularity(Mark.UNIT, style), 60)
        self.assertEqual(tick_granularity(Mark.HALF, style), 30)
        self.assertEqual(tick_granularity(Mark.HALF, RulerStyle(cell_width=60, has_half=False)), 60)
        self.assertEqual(tick_granularity(Mark.FRACTION, style), 6)
        with self.assertRaises(ValueError):
            tick_granularity("unit", style)

    def test_snap_interval(self):
        self.assertIsNone(snap_interval(Mark.NONE, 2, 10))
        self.assertEqual(snap_interval(Mark.UNIT, 2, 10), 2)
        self.assertEqual(snap_interval(Mark.HALF, 2, 10), 1)
        self.assertEqual(snap_interval(Mark.FRACTION, 2, 10), 0.2)
        with self.assertRaises(ValueError):
            snap_interval(None, 2, 10)

    def test_tick_crossed(self):
        bounds = Bounds(-300, 0)
        self.assertTrue(tick_crossed(-54, -66, 60, bounds))
        self.assertFalse(tick_crossed(-24, -36, 60, bounds))
        self.assertFalse(tick_crossed(-270, -310, 60, bounds))
        self.assertFalse(tick_crossed(-250, -300, 60, bounds))
        self.assertTrue(tick_crossed(6, -6, 60, Bounds(-600, 600)))


class TestControllerState(unittest.TestCase):
    def test_is_animated(self):
        animated = {state for state in ControllerState if state.is_animated}
        self.assertEqual(animated, {ControllerState.FLICKING, ControllerState.SPRINGING, ControllerState.ANIMATING})


if __name__ == '__main__':
    unittest.main()
