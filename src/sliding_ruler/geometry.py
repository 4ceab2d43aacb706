import math
from enum import Enum
from typing import NamedTuple, Tuple


class LayoutDirection(Enum):
    """Horizontal layout direction of the host."""
    LEFT_TO_RIGHT = "ltr"
    RIGHT_TO_LEFT = "rtl"


class Bounds(NamedTuple):
    """Closed range [lower, upper]. Either end may be infinite."""
    lower: float
    upper: float

    def contains(self, x: float) -> bool:
        return contains(x, self)

    def clamp(self, x: float) -> float:
        return clamp(x, self.lower, self.upper)

    def is_bound(self, x: float) -> bool:
        return is_bound(x, self)

    def nearest_bound(self, x: float) -> float:
        return nearest_bound(x, self)


def clamp(x: float, lo: float, hi: float) -> float:
    """Bound x to [lo, hi]. Assumes lo <= hi."""
    # + 0.0 turns a negative zero into 0.0
    return min(max(x, lo), hi) + 0.0


def is_bound(x: float, bounds: Tuple[float, float]) -> bool:
    """True if x is exactly one of the range endpoints."""
    return x == bounds[0] or x == bounds[1]


def contains(x: float, bounds: Tuple[float, float]) -> bool:
    return bounds[0] <= x <= bounds[1]


def nearest_bound(x: float, bounds: Tuple[float, float]) -> float:
    lower, upper = bounds
    return lower if abs(x - lower) <= abs(x - upper) else upper


def directional_value(x: float, layout_direction: LayoutDirection) -> float:
    """Negate x under right-to-left layout."""
    return -x if layout_direction == LayoutDirection.RIGHT_TO_LEFT else x


def approximated(x: float, places: int = 6) -> float:
    """Round away floating point noise before integer comparisons."""
    if math.isinf(x) or math.isnan(x):
        return x
    return round(x, places)


def next_odd(n: int) -> int:
    return n if n % 2 else n + 1


def previous_even(n: int) -> int:
    return n - 1 if n % 2 else n
