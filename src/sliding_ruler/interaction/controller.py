import logging
import math
from typing import Callable, Optional, Tuple

from ..binding import ValueBinding
from ..config import Mark, RulerConfig, RulerStyle
from ..feedback import FeedbackKind, HapticFeedback
from ..geometry import Bounds, approximated
from ..mechanics import Inertia, Spring, ease_out
from ..rulers import CellWindow, ValueOffsetMapper
from ..timing import FrameSource, QtFrameSource, VSyncedTimer
from .gesture import DragGestureValue, GesturePhase
from .state import ControllerState

logger = logging.getLogger(__name__)

SNAP_ANIMATION_DURATION = 0.1


def tick_granularity(tick: Mark, style: RulerStyle) -> Optional[float]:
    """Offset distance between two tick boundaries, None when ticks are disabled."""
    if tick == Mark.NONE:
        return None
    elif tick == Mark.UNIT:
        return style.cell_width
    elif tick == Mark.HALF:
        return style.cell_width / 2 if style.has_half else style.cell_width
    elif tick == Mark.FRACTION:
        return style.cell_width / style.fractions
    raise ValueError(f"Invalid tick mark {tick!r}. Use a Mark member.")


def snap_interval(snap: Mark, step: float, fractions: int) -> Optional[float]:
    """Value distance between two snap candidates, None when snapping is disabled."""
    if snap == Mark.NONE:
        return None
    elif snap == Mark.UNIT:
        return step
    elif snap == Mark.HALF:
        return step / 2
    elif snap == Mark.FRACTION:
        return step / fractions
    raise ValueError(f"Invalid snap mark {snap!r}. Use a Mark member.")


def nearest_snap_value(value: float, interval: Optional[float], tie_break: str = "upper") -> float:
    """Nearest multiple of `interval`. Exact ties resolve towards `tie_break` ('upper' or 'lower')."""
    if interval is None or not math.isfinite(value):
        return value
    lower = math.floor(value / interval) * interval
    upper = math.ceil(value / interval) * interval
    delta_down = approximated(abs(value - lower))
    delta_up = approximated(abs(value - upper))
    if delta_down < delta_up:
        return lower
    if delta_up < delta_down:
        return upper
    return upper if tie_break == "upper" else lower


def tick_crossed(offset0: float, offset1: float, granularity: float, drag_bounds: Bounds) -> bool:
    """Whether moving from offset0 to offset1 crosses a tick boundary away from the drag bounds."""
    if not (drag_bounds.contains(offset0) and drag_bounds.contains(offset1)):
        return False
    if drag_bounds.is_bound(offset0) or drag_bounds.is_bound(offset1):
        return False
    if (offset0 < 0) != (offset1 < 0):
        return True
    return math.floor(approximated(offset0 / granularity)) != math.floor(approximated(offset1 / granularity))


class SlidingRulerController:
    """
    State machine behind a sliding ruler.

    Turns drag samples into value updates, then animates fling inertia,
    rubber-band release and snapping on a frame source. The value itself is
    owned by the host and accessed through a ValueBinding; the controller
    only writes it through `set_value` (or when snapping).

    Every callback (gesture or frame) must run on the same thread, usually
    the Qt event loop.

    Key behaviors:
    - Dragging past the bounds is damped by a rubber-band curve
    - Fast releases fling with exponential deceleration
    - A fling hitting a bound hands its remaining velocity to a spring
    - Out-of-bounds releases spring back to the nearest bound
    - A new touch or an external value change interrupts any animation
    """

    def __init__(
        self,
        value: ValueBinding,
        config: Optional[RulerConfig] = None,
        style: Optional[RulerStyle] = None,
        frame_source: Optional[FrameSource] = None,
        feedback: Optional[HapticFeedback] = None,
        on_editing_changed: Optional[Callable[[bool], None]] = None,
        on_boundary_met: Optional[Callable[[], None]] = None,
        on_tick: Optional[Callable[[], None]] = None,
    ) -> None:
        """Create controller for the bound value. Uses a QtFrameSource when no frame source is given."""
        self.binding = value
        self.config = config or RulerConfig()
        self.style = style or RulerStyle()
        self.frame_source = frame_source if frame_source is not None else QtFrameSource()
        self.feedback = feedback
        self.on_editing_changed = on_editing_changed
        self.on_boundary_met = on_boundary_met
        self.on_tick = on_tick

        self.mapper = ValueOffsetMapper(self.config.bounds, self.config.step, self.style.cell_width, self.config.layout_direction)
        self.cell_window = CellWindow(self.style.cell_width, self.config.cell_overflow)
        self.inertia = Inertia(self.config.deceleration_rate)
        self.spring = Spring()

        self._state = ControllerState.IDLE
        # Offset recorded when a drag session (or a fling) starts
        self.reference_offset = 0.0
        # Virtual offset of the ruler while it is not idle
        self.drag_offset = 0.0
        # Rendered value while the snap animation runs
        self.animated_value = 0.0
        # Last value written by the controller, to tell our writes from the host's
        self.last_value_set = self.clamped_value
        self.control_width: Optional[float] = None

        self._timer: Optional[VSyncedTimer] = None
        self._generation = 0
        self._editing = False

    # Properties

    @property
    def state(self) -> ControllerState:
        return self._state

    @state.setter
    def state(self, new_state: ControllerState) -> None:
        if new_state != self._state:
            logger.debug("State %s -> %s", self._state.value, new_state.value)
            self._state = new_state

    @property
    def value(self) -> float:
        return self.binding.get()

    @value.setter
    def value(self, new_value: float) -> None:
        self.binding.set(new_value)

    @property
    def bounds(self) -> Bounds:
        return self.config.bounds

    @property
    def step(self) -> float:
        return self.config.step

    @property
    def clamped_value(self) -> float:
        return self.bounds.clamp(self.value)

    @property
    def drag_bounds(self) -> Bounds:
        return self.mapper.drag_bounds

    @property
    def is_editing(self) -> bool:
        return self._editing

    @property
    def is_rubber_band_needing_release(self) -> bool:
        return not self.drag_bounds.contains(self.drag_offset)

    @property
    def rubber_extent(self) -> float:
        if self.control_width and self.control_width > 0:
            return self.control_width
        return self.cell_window.width

    @property
    def effective_offset(self) -> float:
        """Offset the ruler is rendered at in the current state."""
        if self._state == ControllerState.IDLE:
            return self.mapper.offset_from_value(self.clamped_value)
        elif self._state == ControllerState.ANIMATING:
            return self.mapper.offset_from_value(self.animated_value)
        return self.drag_offset

    # Rendering

    def rendering_values(self) -> Tuple[float, float]:
        """(value, offset) a renderer should draw right now. Also recentres the cell window."""
        self.check_external_change()

        if self._state == ControllerState.IDLE:
            value = self.clamped_value
            offset = self.mapper.offset_from_value(value)
        elif self._state == ControllerState.ANIMATING:
            value = self.animated_value
            offset = self.mapper.offset_from_value(value)
        else:
            offset = self.drag_offset
            value = self.mapper.value_from_offset(offset)

        self.cell_window.follow(value, self.step)
        return value, offset

    def update_control_width(self, width: float) -> bool:
        """Store the viewport width. Returns True when the cells were regenerated."""
        self.control_width = width
        return self.cell_window.update(width)

    def check_external_change(self) -> bool:
        """Stop animating if the host changed the value behind our back. Returns True when overridden."""
        if not self._state.is_animated or self.value == self.last_value_set:
            return False
        logger.debug("Value changed externally to %r while %s", self.value, self._state.value)
        self._cancel_current_timer()
        self.state = ControllerState.IDLE
        self._end_drag_session()
        return True

    # Value management

    def set_value(self, new_value: float) -> None:
        """Write the value clamped to the bounds, signalling when a bound is reached."""
        clamped = self.bounds.clamp(new_value)
        was_bound = self.bounds.is_bound(self.value)

        self.last_value_set = clamped
        if self.value != clamped:
            self.value = clamped

        if self.bounds.is_bound(clamped) and not was_bound:
            self._boundary_met()

    def nearest_snap_value(self, value: float) -> float:
        interval = snap_interval(self.config.snap, self.step, self.style.fractions)
        return nearest_snap_value(value, interval, self.config.snap_tie_break)

    def snap_if_needed(self) -> None:
        """Snap the value to the nearest mark allowed by the snap policy, then settle."""
        current = self.clamped_value
        nearest = self.bounds.clamp(self.nearest_snap_value(current))
        delta = abs(nearest - current)

        if approximated(delta) == 0 or delta >= self.step / self.style.fractions:
            self._settle()
            return

        self.drag_offset = self.mapper.offset_from_value(nearest)
        self.set_value(nearest)

        if delta <= self.step / 200:
            self._settle()
            return

        self.animated_value = current
        self.state = ControllerState.ANIMATING

        def animations(progress: float, dt: float) -> None:
            self.animated_value = current + (nearest - current) * ease_out(progress / SNAP_ANIMATION_DURATION)

        def completion() -> None:
            self.animated_value = nearest
            self._settle()

        self._start_timer(animations, completion, SNAP_ANIMATION_DURATION)

    # Gesture handling

    def handle_drag(self, gesture: DragGestureValue) -> None:
        """Dispatch a drag sample to the matching phase handler."""
        if gesture.phase == GesturePhase.BEGAN:
            self.drag_began(gesture)
        elif gesture.phase == GesturePhase.CHANGED:
            self.drag_changed(gesture)
        elif gesture.phase == GesturePhase.ENDED:
            self.drag_ended(gesture)
        elif gesture.phase == GesturePhase.CANCELLED:
            self.drag_ended(DragGestureValue(GesturePhase.ENDED, gesture.translation, 0.0, gesture.start_location, gesture.location))

    def touch_down(self) -> None:
        """A finger touched the ruler, before any drag is recognized."""
        if self._state == ControllerState.FLICKING:
            self._cancel_current_timer()
            self.state = ControllerState.STOPPED_FLICK
        elif self._state == ControllerState.SPRINGING:
            self._cancel_current_timer()
            self.state = ControllerState.STOPPED_SPRING
        elif self._state == ControllerState.ANIMATING:
            self._cancel_current_timer()
            self.animated_value = self.clamped_value
            self._settle()

    def touch_ended_prematurely(self) -> None:
        """The finger lifted without the touch turning into a drag."""
        if self._state == ControllerState.STOPPED_FLICK:
            self.state = ControllerState.IDLE
            self.snap_if_needed()
        elif self._state == ControllerState.STOPPED_SPRING:
            self.release_rubber_band()

    def drag_began(self, gesture: DragGestureValue) -> None:
        """Open a drag: interrupt any animation and record the reference offset."""
        if self._state.is_animated:
            self.touch_down()
        self._begin_session()
        if self._state != ControllerState.STOPPED_SPRING:
            self.drag_offset = self.mapper.offset_from_value(self.clamped_value)
        self.reference_offset = self.drag_offset
        self.state = ControllerState.DRAGGING

    def drag_changed(self, gesture: DragGestureValue) -> None:
        """Move the ruler by the cumulative translation, rubber-banded past the bounds."""
        if self._state != ControllerState.DRAGGING:
            return
        new_offset = self.reference_offset + gesture.translation
        new_value = self.mapper.value_from_offset(new_offset)

        self._tick_if_needed(self.drag_offset, new_offset)

        self.set_value(new_value)
        self.drag_offset = self.mapper.apply_rubber(new_offset, self.rubber_extent)

    def drag_ended(self, gesture: DragGestureValue) -> None:
        """Release the drag: spring back, fling or snap depending on offset and velocity."""
        if self._state != ControllerState.DRAGGING:
            return
        if self.is_rubber_band_needing_release:
            self.release_rubber_band()
        elif abs(gesture.velocity) > self.config.flick_velocity_threshold:
            self._apply_inertia(gesture.velocity)
        else:
            self.state = ControllerState.IDLE
            self.snap_if_needed()

    def stop(self) -> None:
        """Abort any animation and settle on the current value."""
        self._cancel_current_timer()
        self._settle()

    # Mechanic simulation

    def _apply_inertia(self, initial_velocity: float) -> None:
        reference = self.drag_offset
        self.reference_offset = reference
        inertia = self.inertia

        def shift(distance: float) -> None:
            new_offset = reference + distance
            self._tick_if_needed(self.drag_offset, new_offset)
            self.set_value(self.mapper.value_from_offset(new_offset))
            self.drag_offset = new_offset

        def animations(progress: float, dt: float) -> None:
            shift(inertia.distance(progress, initial_velocity))

        total_distance = inertia.total_distance(initial_velocity)
        final_offset = reference + total_distance
        drag_bounds = self.drag_bounds

        self.state = ControllerState.FLICKING

        if drag_bounds.contains(final_offset):
            duration = inertia.duration(initial_velocity)
            logger.debug("Fling v0=%.1f for %.3fs over %.1fpx", initial_velocity, duration, total_distance)

            def completion() -> None:
                shift(total_distance)
                self.state = ControllerState.IDLE
                self.snap_if_needed()

            self._start_timer(animations, completion, duration)
        else:
            bound_offset = drag_bounds.clamp(final_offset)
            allowed_distance = bound_offset - reference
            duration = inertia.time_to_reach(allowed_distance, initial_velocity)
            logger.debug("Fling v0=%.1f hits bound %.1f after %.3fs", initial_velocity, bound_offset, duration)

            def completion() -> None:
                shift(allowed_distance)
                self.drag_offset = bound_offset
                self.set_value(self.bounds.nearest_bound(self.mapper.value_from_offset(bound_offset)))
                remaining_velocity = inertia.velocity(duration, initial_velocity)
                self._apply_inertial_rubber(remaining_velocity)

            self._start_timer(animations, completion, duration)

    def _apply_inertial_rubber(self, velocity: float) -> None:
        duration = self.spring.duration(abs(velocity), 0)
        target_offset = self.drag_bounds.nearest_bound(self.drag_offset)

        self.state = ControllerState.SPRINGING
        logger.debug("Inertial rubber v0=%.1f for %.3fs", velocity, duration)

        def animations(progress: float, dt: float) -> None:
            self.drag_offset = target_offset + self.spring.value(progress, velocity, 0)

        def completion() -> None:
            self.drag_offset = target_offset
            self._settle()

        self._start_timer(animations, completion, duration)

    def release_rubber_band(self) -> None:
        """Spring an out-of-range offset back to the nearest drag bound."""
        drag_bounds = self.drag_bounds
        target_offset = drag_bounds.clamp(self.drag_offset)
        delta = self.drag_offset - target_offset
        duration = self.spring.duration(0, abs(delta))

        self.state = ControllerState.SPRINGING
        logger.debug("Rubber release of %.1fpx for %.3fs", delta, duration)

        def animations(progress: float, dt: float) -> None:
            self.drag_offset = target_offset + self.spring.value(progress, 0, delta)

        def completion() -> None:
            self.drag_offset = target_offset
            self._settle()

        self._start_timer(animations, completion, duration)

    # Timer management

    def _start_timer(self, animations: Callable[[float, float], None], completion: Callable[[], None], duration: float) -> None:
        self._cancel_current_timer()
        generation = self._generation

        def guarded_animations(progress: float, dt: float) -> None:
            if generation != self._generation or self.check_external_change():
                return
            animations(progress, dt)

        def guarded_completion(completed: bool) -> None:
            if not completed or generation != self._generation:
                return
            self._timer = None
            if self.check_external_change():
                return
            completion()

        self._timer = VSyncedTimer(self.frame_source, guarded_animations, guarded_completion, duration=duration)

    def _cancel_current_timer(self) -> None:
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    # Session & feedback

    def _settle(self) -> None:
        self.state = ControllerState.IDLE
        self._end_drag_session()

    def _begin_session(self) -> None:
        if self._editing:
            return
        self._editing = True
        if self.on_editing_changed:
            self.on_editing_changed(True)

    def _end_drag_session(self) -> None:
        self.reference_offset = 0.0
        if not self._editing:
            return
        self._editing = False
        if self.on_editing_changed:
            self.on_editing_changed(False)

    def _tick_if_needed(self, offset0: float, offset1: float) -> None:
        granularity = tick_granularity(self.config.tick, self.style)
        if granularity is not None and tick_crossed(offset0, offset1, granularity, self.drag_bounds):
            self._value_tick()

    def _boundary_met(self) -> None:
        if self.feedback:
            self.feedback.emit(FeedbackKind.BOUNDARY)
        if self.on_boundary_met:
            self.on_boundary_met()

    def _value_tick(self) -> None:
        if self.feedback:
            self.feedback.emit(FeedbackKind.TICK)
        if self.on_tick:
            self.on_tick()
