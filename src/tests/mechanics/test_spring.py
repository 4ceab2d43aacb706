import math
import unittest

from sliding_ruler.mechanics import Spring, ease_out


class TestSpring(unittest.TestCase):
    def setUp(self):
        self.spring = Spring()

    def test_constants(self):
        self.assertEqual(self.spring.beta, 10)
        self.assertEqual(self.spring.damping, 20)

    def test_initial_conditions(self):
        self.assertEqual(self.spring.value(0, 0, 100), 100)
        self.assertEqual(self.spring.value(0, 250, 0), 0)
        self.assertAlmostEqual(self.spring.velocity(0, 250, 0), 250)
        self.assertAlmostEqual(self.spring.velocity(0, -40, 12), -40)

    def test_solves_critically_damped_ode(self):
        v0, c1, h = 80.0, 30.0, 1e-4
        for t in (0.05, 0.2, 0.7):
            x = self.spring.value(t, v0, c1)
            dx = (self.spring.value(t + h, v0, c1) - self.spring.value(t - h, v0, c1)) / (2 * h)
            ddx = (self.spring.value(t + h, v0, c1) - 2 * x + self.spring.value(t - h, v0, c1)) / h ** 2
            residual = ddx + self.spring.damping * dx + self.spring.stiffness * x
            self.assertAlmostEqual(residual, 0, delta=0.5)
            self.assertAlmostEqual(dx, self.spring.velocity(t, v0, c1), delta=1e-2)

    def test_duration_bounds_displacement(self):
        duration = self.spring.duration(0, 100)
        self.assertGreater(duration, 0)
        self.assertLess(abs(self.spring.value(duration, 0, 100)), self.spring.threshold)

    def test_duration_with_velocity_only(self):
        duration = self.spring.duration(1900, 0)
        self.assertGreater(duration, 0)
        for t in (duration, duration * 1.5, duration * 3):
            self.assertLess(abs(self.spring.value(t, 1900, 0)), self.spring.threshold)

    def test_duration_is_max_of_envelopes(self):
        c1 = 100
        t1 = math.log(2 * c1 / 0.25) / 10
        t2 = 2 / 10 * math.log(4 * (10 * c1) / (math.e * 10 * 0.25))
        self.assertAlmostEqual(self.spring.duration(0, c1), max(t1, t2))

    def test_degenerate_duration(self):
        self.assertEqual(self.spring.duration(0, 0), 0.0)
        self.assertEqual(self.spring.duration(5, -5), 0.0)
        self.assertEqual(self.spring.duration(0, 0.01), 0.0)


class TestEaseOut(unittest.TestCase):
    def test_endpoints_and_shape(self):
        self.assertEqual(ease_out(0), 0)
        self.assertEqual(ease_out(1), 1)
        self.assertEqual(ease_out(2), 1)
        self.assertGreater(ease_out(0.5), 0.5)


if __name__ == '__main__':
    unittest.main()
