import logging
from typing import Callable, Dict, Optional, Protocol

from PySide6.QtCore import QElapsedTimer, QObject, Qt, QTimer

logger = logging.getLogger(__name__)

FrameCallback = Callable[[float], None]


class FrameHandle:
    """Subscription to a frame source. Cancelling twice is a no-op."""

    def __init__(self, source: "BaseFrameSource", handle_id: int) -> None:
        self._source = source
        self._id = handle_id
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if not self._active:
            return
        self._active = False
        self._source._unsubscribe(self._id)


class FrameSource(Protocol):
    """Per-frame clock. Each tick receives the seconds elapsed since the previous frame."""

    def schedule(self, tick: FrameCallback) -> FrameHandle:
        ...


class BaseFrameSource:
    """Subscriber bookkeeping shared by the concrete frame sources."""

    def __init__(self) -> None:
        self._next_id = 1
        self._subscribers: Dict[int, FrameCallback] = {}

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def schedule(self, tick: FrameCallback) -> FrameHandle:
        handle_id = self._next_id
        self._next_id += 1
        self._subscribers[handle_id] = tick
        if len(self._subscribers) == 1:
            self._on_first_subscriber()
        return FrameHandle(self, handle_id)

    def _unsubscribe(self, handle_id: int) -> None:
        if self._subscribers.pop(handle_id, None) is not None and not self._subscribers:
            self._on_last_unsubscribed()

    def _dispatch(self, dt: float) -> int:
        # snapshot: callbacks may cancel themselves or schedule new subscribers
        executed = 0
        for handle_id, tick in list(self._subscribers.items()):
            if handle_id in self._subscribers:
                tick(dt)
                executed += 1
        return executed

    def _on_first_subscriber(self) -> None:
        pass

    def _on_last_unsubscribed(self) -> None:
        pass


class ManualFrameSource(BaseFrameSource):
    """Frame source advanced explicitly by the host or a test."""

    def __init__(self) -> None:
        super().__init__()
        self.now = 0.0

    def advance(self, dt: float) -> int:
        """Advance the clock by dt seconds and run one frame. Returns the number of callbacks run."""
        if dt < 0.0:
            raise ValueError("dt must be >= 0")
        self.now += dt
        return self._dispatch(dt)

    def run(self, duration: float, dt: float = 1 / 60, max_frames: int = 100000) -> int:
        """Run frames of dt seconds until `duration` elapsed or nothing is subscribed."""
        if dt <= 0.0:
            raise ValueError("dt must be > 0")
        frames = 0
        elapsed = 0.0
        while self._subscribers and elapsed < duration and frames < max_frames:
            self.advance(dt)
            elapsed += dt
            frames += 1
        return frames

    def run_until_idle(self, dt: float = 1 / 60, max_frames: int = 100000) -> int:
        """Run frames until no subscriber remains."""
        return self.run(float("inf"), dt, max_frames)


class QtFrameSource(BaseFrameSource):
    """
    Frame source driven by a precise QTimer on the Qt event loop.

    A single timer serves every subscriber; it only runs while something is
    subscribed. Elapsed time is measured with QElapsedTimer so animations
    stay frame-rate independent.
    """

    def __init__(self, fps: int = 120, parent: Optional[QObject] = None) -> None:
        """Create a frame source ticking at `fps` frames per second (at least 60)."""
        super().__init__()
        if fps < 60:
            raise ValueError(f"fps must be >= 60, got {fps}")
        self.fps = fps
        self._clock = QElapsedTimer()
        self._last_ms = 0
        self._timer = QTimer(parent)
        self._timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._timer.setInterval(int(1000 / fps))
        self._timer.timeout.connect(self._on_timeout)

    def _on_first_subscriber(self) -> None:
        self._clock.start()
        self._last_ms = 0
        self._timer.start()
        logger.debug("Frame timer started at %d fps", self.fps)

    def _on_last_unsubscribed(self) -> None:
        self._timer.stop()
        logger.debug("Frame timer stopped")

    def _on_timeout(self) -> None:
        now_ms = self._clock.elapsed()
        dt = (now_ms - self._last_ms) / 1000.0
        self._last_ms = now_ms
        self._dispatch(dt)
