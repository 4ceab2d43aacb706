"""Sliding ruler public API."""

from .binding import ValueBinding, ValueHolder
from .config import Mark, RulerConfig, RulerStyle
from .feedback import CallbackFeedback, FeedbackKind, HapticFeedback
from .geometry import Bounds, LayoutDirection
from .interaction import ControllerState, DragGestureValue, GesturePhase, SlidingRulerController
from .mechanics import Inertia, Spring
from .rulers import CellWindow, RulerCell, ValueOffsetMapper
from .signals import RulerSignals
from .timing import FrameHandle, ManualFrameSource, QtFrameSource, VSyncedTimer

__all__ = [
    "SlidingRulerController",
    "ControllerState",
    "DragGestureValue",
    "GesturePhase",
    "RulerConfig",
    "RulerStyle",
    "Mark",
    "Bounds",
    "LayoutDirection",
    "ValueBinding",
    "ValueHolder",
    "FeedbackKind",
    "HapticFeedback",
    "CallbackFeedback",
    "Inertia",
    "Spring",
    "ValueOffsetMapper",
    "CellWindow",
    "RulerCell",
    "RulerSignals",
    "FrameHandle",
    "ManualFrameSource",
    "QtFrameSource",
    "VSyncedTimer",
]
