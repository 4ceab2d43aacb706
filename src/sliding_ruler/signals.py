from typing import Any, Callable, Dict, Optional

from PySide6.QtCore import QObject, Signal

from .binding import ValueBinding


class RulerSignals(QObject):
    """
    Qt bridge for a SlidingRulerController.

    Owns the ruler value and republishes every controller notification as a
    Qt signal so widgets can connect to it the usual way:

        signals = RulerSignals(value=5.0)
        controller = SlidingRulerController(signals.binding(), config, **signals.callbacks())
        signals.valueChanged.connect(label.setNum)
    """

    valueChanged = Signal(float)
    editingChanged = Signal(bool)
    boundaryMet = Signal()
    ticked = Signal()

    def __init__(self, value: float = 0.0, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._value = float(value)

    def value(self) -> float:
        return self._value

    def setValue(self, value: float) -> None:
        value = float(value)
        if value == self._value:
            return
        self._value = value
        self.valueChanged.emit(value)

    def binding(self) -> ValueBinding:
        """Binding reading and writing this object's value."""
        return ValueBinding(get=self.value, set=self.setValue)

    def callbacks(self) -> Dict[str, Callable[..., Any]]:
        """Controller keyword arguments routing notifications to the signals."""
        return {
            "on_editing_changed": self.editingChanged.emit,
            "on_boundary_met": self.boundaryMet.emit,
            "on_tick": self.ticked.emit,
        }
