import math


class Spring:
    """
    Critically damped spring relaxing a displacement back to zero.

    Solution of x'' + 2 beta x' + beta^2 x = 0 with x(0) = c1, x'(0) = v0:
    x(t) = e^(-beta t) * (c1 + (v0 + beta c1) t).
    """

    stiffness = 100.0
    threshold = 0.25

    @property
    def damping(self) -> float:
        return 2 * math.sqrt(self.stiffness)

    @property
    def beta(self) -> float:
        return math.sqrt(self.stiffness)

    def value(self, t: float, v0: float, c1: float) -> float:
        """Displacement at time t for the initial velocity v0 and displacement c1."""
        c2 = v0 + self.beta * c1
        return math.exp(-self.beta * t) * (c1 + c2 * t)

    def velocity(self, t: float, v0: float, c1: float) -> float:
        """Derivative of `value` with respect to t."""
        c2 = v0 + self.beta * c1
        return math.exp(-self.beta * t) * (c2 - self.beta * (c1 + c2 * t))

    def duration(self, v0: float, c1: float) -> float:
        """Time after which the displacement magnitude stays below `threshold`."""
        if v0 + c1 == 0:
            return 0.0

        beta = self.beta
        c2 = abs(v0 + beta * c1)
        c1 = abs(c1)

        # decay envelope of c1 * e^(-beta t)
        t1 = 0.0
        if c1 > 0:
            t1 = math.log(2 * c1 / self.threshold) / beta

        # envelope of c2 * t * e^(-beta t), bounded through max(t e^(-beta t / 2)) = 2 / (e beta)
        t2 = 0.0
        if c2 > 0:
            t2 = 2 / beta * math.log(4 * c2 / (math.e * beta * self.threshold))

        return max(t1, t2, 0.0)
