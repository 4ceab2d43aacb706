import math
from typing import Tuple

from ..geometry import Bounds, LayoutDirection, clamp, directional_value


class ValueOffsetMapper:
    """Converts between the ruler's value and its virtual scroll offset.

    One step of value spans one cell of `cell_width` pixels. Increasing values
    move the ruler towards negative offsets under left-to-right layout and
    towards positive offsets under right-to-left layout.
    """

    rubber_coefficient = 0.55

    def __init__(self, bounds: Tuple[float, float], step: float, cell_width: float, layout_direction: LayoutDirection = LayoutDirection.LEFT_TO_RIGHT) -> None:
        """Create mapper for values in `bounds` spaced by `step` per `cell_width` pixels."""
        if not step > 0:
            raise ValueError(f"step must be > 0, got {step}")
        if not cell_width > 0:
            raise ValueError(f"cell_width must be > 0, got {cell_width}")
        self.bounds = Bounds(*bounds)
        self.step = step
        self.cell_width = cell_width
        self.layout_direction = layout_direction

    def directional(self, x: float) -> float:
        return directional_value(x, self.layout_direction)

    def offset_from_value(self, value: float) -> float:
        """Convert value to offset."""
        return self.directional(-value * self.cell_width / self.step) + 0.0

    def value_from_offset(self, offset: float) -> float:
        """Convert offset to value."""
        return self.directional(-offset / self.cell_width * self.step) + 0.0

    def value_delta(self, offset_delta: float) -> float:
        """Convert an offset delta to a value delta."""
        return self.directional(-offset_delta / self.cell_width * self.step)

    @property
    def drag_bounds(self) -> Bounds:
        """Offset range matching the value bounds. Infinite bounds stay infinite."""
        a = self._bound_offset(self.bounds.lower)
        b = self._bound_offset(self.bounds.upper)
        return Bounds(min(a, b), max(a, b))

    def _bound_offset(self, bound: float) -> float:
        if math.isinf(bound):
            return self.directional(-math.copysign(math.inf, bound))
        return self.offset_from_value(bound)

    def contains_offset(self, offset: float) -> bool:
        return self.drag_bounds.contains(offset)

    def apply_rubber(self, offset: float, extent: float) -> float:
        """Compress the part of `offset` lying outside the drag bounds.

        Uses (1 - 1 / (c * delta / d + 1)) * d, d being the rubber extent
        (usually the control width). The result stays strictly between the
        bound and the raw offset.
        """
        drag_bounds = self.drag_bounds
        if drag_bounds.contains(offset):
            return offset

        limit = clamp(offset, drag_bounds.lower, drag_bounds.upper)
        delta = abs(offset - limit)
        factor = -1 if offset - limit < 0 else 1
        if extent <= 0:
            return limit
        c = self.rubber_coefficient
        rubber_delta = (1 - (1 / ((c * delta / extent) + 1))) * extent * factor
        return limit + rubber_delta
