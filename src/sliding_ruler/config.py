import math
from dataclasses import dataclass
from enum import Enum
from typing import Literal, Tuple

from .geometry import Bounds, LayoutDirection


class Mark(Enum):
    """Graduation granularity used for snapping and haptic ticks."""
    NONE = "none"
    UNIT = "unit"
    HALF = "half"
    FRACTION = "fraction"


# Deceleration rate of the ruler's fling, per millisecond.
RULER_DECELERATION_RATE = 0.9972


@dataclass
class RulerStyle:
    """Rendering constants the motion core reads but does not own.

    cell_width is the pixel width of one step, fractions the number of
    fraction marks per cell, has_half whether the scale draws a half mark.
    """
    cell_width: float = 120.0
    fractions: int = 10
    has_half: bool = True

    def __post_init__(self) -> None:
        if not self.cell_width > 0:
            raise ValueError(f"cell_width must be > 0, got {self.cell_width}")
        if self.fractions < 1:
            raise ValueError(f"fractions must be >= 1, got {self.fractions}")


@dataclass
class RulerConfig:
    """Behaviour of a sliding ruler.

    Args:
        bounds: Allowed value range (lower, upper). Use math.inf for an open end.
        step: Value stride between two unit marks.
        snap: Marks the value sticks to after a drag session.
        tick: Marks that produce a tick when crossed.
        cell_overflow: Extra cells kept on each side of the viewport.
        layout_direction: Host layout direction.
        flick_velocity_threshold: Release speed (px/s) above which the ruler flings.
        deceleration_rate: Per-millisecond velocity factor of the fling.
        snap_tie_break: Which candidate wins when a value is exactly between two marks.
    """
    bounds: Tuple[float, float] = (-math.inf, math.inf)
    step: float = 1.0
    snap: Mark = Mark.NONE
    tick: Mark = Mark.NONE
    cell_overflow: int = 2
    layout_direction: LayoutDirection = LayoutDirection.LEFT_TO_RIGHT
    flick_velocity_threshold: float = 90.0
    deceleration_rate: float = RULER_DECELERATION_RATE
    snap_tie_break: Literal["upper", "lower"] = "upper"

    def __post_init__(self) -> None:
        self.bounds = Bounds(float(self.bounds[0]), float(self.bounds[1]))
        self.snap = Mark(self.snap)
        self.tick = Mark(self.tick)
        self.layout_direction = LayoutDirection(self.layout_direction)
        if not self.step > 0:
            raise ValueError(f"step must be > 0, got {self.step}")
        if math.isnan(self.bounds.lower) or math.isnan(self.bounds.upper) or self.bounds.lower > self.bounds.upper:
            raise ValueError(f"Invalid bounds {tuple(self.bounds)}")
        if self.cell_overflow < 0:
            raise ValueError(f"cell_overflow must be >= 0, got {self.cell_overflow}")
        if not 0 < self.deceleration_rate < 1:
            raise ValueError(f"deceleration_rate must be in (0, 1), got {self.deceleration_rate}")
        if self.snap_tie_break not in ("upper", "lower"):
            raise ValueError("Invalid snap_tie_break. Use 'upper' or 'lower'.")
        if self.flick_velocity_threshold < 0:
            raise ValueError(f"flick_velocity_threshold must be >= 0, got {self.flick_velocity_threshold}")
