import logging
import math
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from ..geometry import next_odd, previous_even

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RulerCell:
    """One graduation cell, identified by its mark index relative to the window centre."""
    mark: int

    @property
    def id(self) -> int:
        return self.mark


class CellWindow:
    """
    Finite window of cells covering the viewport.

    Holds an odd number of cells [-N..N] around a centre mark (`mark_offset`).
    The window is regenerated only when the viewport needs a different cell
    count, and recentred once the value drifts further than `overflow` cells
    from the centre mark.
    """

    def __init__(self, cell_width: float, overflow: int = 2) -> None:
        """Create window of cells `cell_width` pixels wide with `overflow` extra cells per side."""
        if not cell_width > 0:
            raise ValueError(f"cell_width must be > 0, got {cell_width}")
        if overflow < 0:
            raise ValueError(f"overflow must be >= 0, got {overflow}")
        self.cell_width = cell_width
        self.overflow = overflow
        self.cells: List[RulerCell] = [RulerCell(0)]
        self.mark_offset = 0

    @property
    def count(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> float:
        """Pixel width covered by the window."""
        return self.count * self.cell_width

    def required_count(self, control_width: float) -> int:
        return next_odd(int(math.ceil(control_width / self.cell_width)) + self.overflow * 2)

    def update(self, control_width: float) -> bool:
        """Regenerate cells if the control width requires a different count. Returns True on change."""
        count = self.required_count(control_width)
        if count == self.count:
            return False
        self.populate(count)
        return True

    def populate(self, count: int) -> None:
        boundary = previous_even(count) // 2
        self.cells = [RulerCell(mark) for mark in range(-boundary, boundary + 1)]
        logger.debug("Regenerated %d cells", len(self.cells))

    def follow(self, value: float, step: float) -> bool:
        """Recentre the window on `value` when it left the overflow margin. Returns True when recentred."""
        position = value / step
        if not math.isfinite(position):
            return False
        limit = self.overflow if self.overflow > 0 else 0.5
        if abs(position - self.mark_offset) <= limit:
            return False
        self.mark_offset = int(round(position))
        return True

    def translation(self, value: float, step: float) -> float:
        """Pixel shift of the window so that `value` sits under the cursor."""
        return (self.mark_offset - value / step) * self.cell_width

    def marks(self, step: float) -> np.ndarray:
        """Values of the unit marks currently covered by the window."""
        indices = np.fromiter((cell.mark for cell in self.cells), dtype=float, count=self.count)
        return (indices + self.mark_offset) * step

    def cell_bounds(self, cell: RulerCell, step: float) -> Tuple[float, float]:
        """Value span (start, stop) of a cell."""
        mark = (cell.mark + self.mark_offset) * step
        return (mark - step / 2, mark + step / 2)
