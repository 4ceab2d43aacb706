from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class GesturePhase(Enum):
    """Phase of a horizontal drag gesture."""
    BEGAN = "began"
    CHANGED = "changed"
    ENDED = "ended"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class DragGestureValue:
    """One drag sample delivered by the platform adapter.

    Args:
        phase: Gesture phase
        translation: Cumulative horizontal translation since the gesture began (px)
        velocity: Instantaneous horizontal velocity (px/s)
        start_location: Absolute (x, y) location where the gesture began
        location: Absolute (x, y) current location
    """
    phase: GesturePhase
    translation: float = 0.0
    velocity: float = 0.0
    start_location: Tuple[float, float] = (0.0, 0.0)
    location: Tuple[float, float] = (0.0, 0.0)

    @classmethod
    def from_locations(cls, phase: GesturePhase, start_location: Tuple[float, float], location: Tuple[float, float], velocity: float = 0.0) -> "DragGestureValue":
        """Build a sample from absolute locations. Only the horizontal translation is kept."""
        translation = location[0] - start_location[0]
        return cls(phase, translation, velocity, start_location, location)


def is_horizontal_drag(velocity_x: float, velocity_y: float) -> bool:
    """Whether a pan should be recognized as a ruler drag (dominant horizontal axis)."""
    return abs(velocity_x) > abs(velocity_y)
