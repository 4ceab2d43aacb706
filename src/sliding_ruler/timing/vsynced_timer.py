import logging
from typing import Callable, Optional

from .frame_source import FrameSource

logger = logging.getLogger(__name__)

Completion = Callable[[bool], None]


class VSyncedTimer:
    """
    Repeating task bound to a frame source.

    Duration-bounded (``duration`` given): ``animations(progress, dt)`` runs once
    per frame while ``progress < duration``, progress being the frame time
    accumulated since start. ``completion(True)`` then runs exactly once.

    Open-ended (``duration`` is None): ``animations(dt)`` runs every frame until
    ``stop()`` (``completion(True)``) or ``cancel()`` (``completion(False)``).

    ``stop()`` and ``cancel()`` on a finished timer do nothing.
    """

    def __init__(
        self,
        frame_source: FrameSource,
        animations: Callable[..., None],
        completion: Optional[Completion] = None,
        duration: Optional[float] = None,
    ) -> None:
        if duration is not None and duration < 0:
            raise ValueError(f"duration must be >= 0, got {duration}")
        self.duration = duration
        self.progress = 0.0
        self._animations = animations
        self._completion = completion
        self._running = True
        self._handle = frame_source.schedule(self._tick)

    @property
    def running(self) -> bool:
        return self._running

    def stop(self) -> None:
        """Stop and report a natural completion."""
        self._finish(True)

    def cancel(self) -> None:
        """Stop and report an interrupted completion."""
        if self._running:
            logger.debug("Timer cancelled at %.3fs", self.progress)
        self._finish(False)

    def _finish(self, completed: bool) -> None:
        if not self._running:
            return
        self._running = False
        self._handle.cancel()
        if self._completion:
            self._completion(completed)

    def _tick(self, dt: float) -> None:
        if not self._running:
            return
        self.progress += dt
        if self.duration is None:
            self._animations(dt)
        elif self.progress < self.duration:
            self._animations(self.progress, dt)
        else:
            self._finish(True)
