import math

from ..config import RULER_DECELERATION_RATE


class Inertia:
    """
    Closed-form deceleration of a fling.

    The velocity decays exponentially: v(t) = v0 * rate^(1000 t), with the
    rate expressed per millisecond and t in seconds. Velocities are in px/s,
    distances in px.

    All methods are pure functions of their arguments and the rate.
    """

    epsilon = 0.6

    def __init__(self, rate: float = RULER_DECELERATION_RATE) -> None:
        """Create a model decelerating by `rate` per millisecond, 0 < rate < 1."""
        if not 0 < rate < 1:
            raise ValueError(f"Deceleration rate must be in (0, 1), got {rate}")
        self.rate = rate

    @property
    def coef(self) -> float:
        return 1000 * math.log(self.rate)

    @property
    def stop_speed(self) -> float:
        """Speed at which the motion is considered still (residual velocity at `duration`)."""
        return -1000 * self.epsilon * math.log(self.rate)

    def velocity(self, t: float, v0: float) -> float:
        """Velocity at time t for the initial velocity v0."""
        return v0 * self.rate ** (1000 * t)

    def distance(self, t: float, v0: float) -> float:
        """Distance travelled at time t for the initial velocity v0."""
        return v0 * (self.rate ** (1000 * t) - 1) / self.coef

    def total_distance(self, v0: float) -> float:
        """Distance travelled before the motion becomes still."""
        return self.distance(self.duration(v0), v0)

    def duration(self, v0: float) -> float:
        """Time elapsed before the motion becomes still. Never negative."""
        if v0 == 0 or abs(v0) <= self.stop_speed:
            return 0.0
        return math.log(self.stop_speed / abs(v0)) / self.coef

    def time_to_reach(self, x: float, v0: float) -> float:
        """Time needed to travel the distance x. x must lie in the direction of v0 and within reach."""
        if x == 0:
            return 0.0
        return math.log(1 + self.coef * x / v0) / self.coef
