from enum import Enum
from typing import Callable, Dict, Optional, Protocol


class FeedbackKind(Enum):
    """Haptic pulse emitted by the ruler."""
    TICK = "tick"
    BOUNDARY = "boundary"


# (impact style, intensity) expected from the platform for each pulse
FEEDBACK_PROFILES: Dict[FeedbackKind, tuple] = {
    FeedbackKind.TICK: ("light", 0.5),
    FeedbackKind.BOUNDARY: ("rigid", 0.667),
}


class HapticFeedback(Protocol):
    """Host service producing haptic pulses."""

    def emit(self, kind: FeedbackKind) -> None:
        ...


class CallbackFeedback:
    """HapticFeedback forwarding pulses to a plain callable(style, intensity)."""

    def __init__(self, impact: Optional[Callable[[str, float], None]] = None) -> None:
        self.impact = impact
        self.count: Dict[FeedbackKind, int] = {kind: 0 for kind in FeedbackKind}

    def emit(self, kind: FeedbackKind) -> None:
        self.count[kind] += 1
        if self.impact:
            style, intensity = FEEDBACK_PROFILES[kind]
            self.impact(style, intensity)
