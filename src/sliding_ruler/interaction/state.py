from enum import Enum


class ControllerState(Enum):
    """State of the sliding ruler controller."""
    IDLE = "idle"
    DRAGGING = "dragging"
    FLICKING = "flicking"
    SPRINGING = "springing"
    STOPPED_FLICK = "stopped_flick"
    STOPPED_SPRING = "stopped_spring"
    ANIMATING = "animating"

    @property
    def is_animated(self) -> bool:
        return self in (ControllerState.FLICKING, ControllerState.SPRINGING, ControllerState.ANIMATING)
