from .controller import SlidingRulerController, nearest_snap_value, snap_interval, tick_crossed, tick_granularity
from .gesture import DragGestureValue, GesturePhase, is_horizontal_drag
from .state import ControllerState

__all__ = [
    "SlidingRulerController",
    "ControllerState",
    "DragGestureValue",
    "GesturePhase",
    "is_horizontal_drag",
    "nearest_snap_value",
    "snap_interval",
    "tick_crossed",
    "tick_granularity",
]
