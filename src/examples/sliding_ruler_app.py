from typing import List, Optional, Tuple

import numpy as np
from PySide6.QtCore import QElapsedTimer, QRectF, Qt
from PySide6.QtGui import QPainter, QPen
from PySide6.QtWidgets import QApplication, QLabel, QMainWindow, QVBoxLayout, QWidget

from sliding_ruler import (
    ControllerState, DragGestureValue, GesturePhase, Mark, QtFrameSource, RulerConfig, RulerSignals, RulerStyle,
    SlidingRulerController,
)


class SlidingRulerWidget(QWidget):
    """
    Minimal horizontal ruler drawn around a fixed cursor.

    Mouse drags become DragGestureValue samples; repainting follows the
    frame source while the controller animates.
    """

    def __init__(self, signals: RulerSignals, config: RulerConfig, style: RulerStyle, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.frame_source = QtFrameSource(parent=self)
        self.controller = SlidingRulerController(signals.binding(), config, style, self.frame_source, **signals.callbacks())
        self.style_ = style
        self.clock = QElapsedTimer()
        self.clock.start()
        self.samples: List[Tuple[float, float]] = []
        self.start_pos: Optional[Tuple[float, float]] = None
        self.repaint_handle = None
        self.setFixedHeight(60)
        signals.valueChanged.connect(lambda _: self.update())

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.controller.update_control_width(self.width())

    def paintEvent(self, event):
        value, offset = self.controller.rendering_values()
        mapper = self.controller.mapper
        step = self.controller.step
        center = self.width() / 2

        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(self.rect(), Qt.GlobalColor.black)
        painter.setPen(QPen(Qt.GlobalColor.lightGray, 1))

        for mark in self.controller.cell_window.marks(step):
            for fraction in np.linspace(mark, mark + step, self.style_.fractions, endpoint=False):
                x = center + offset - mapper.offset_from_value(fraction)
                height = 20 if fraction == mark else 8
                painter.drawLine(int(x), 0, int(x), height)
            x = center + offset - mapper.offset_from_value(mark)
            painter.drawText(QRectF(x - 30, 24, 60, 20), Qt.AlignmentFlag.AlignCenter, f"{mark:g}")

        painter.setPen(QPen(Qt.GlobalColor.red, 2))
        painter.drawLine(int(center), 0, int(center), self.height())

    def mousePressEvent(self, event):
        if event.button() != Qt.MouseButton.LeftButton:
            return
        pos = event.position()
        self.start_pos = (pos.x(), pos.y())
        self.samples = [(self.clock.elapsed() / 1000, pos.x())]
        self.controller.touch_down()
        self.controller.handle_drag(DragGestureValue.from_locations(GesturePhase.BEGAN, self.start_pos, self.start_pos))
        self._follow_animation()

    def mouseMoveEvent(self, event):
        if self.start_pos is None:
            return
        pos = event.position()
        self.samples = (self.samples + [(self.clock.elapsed() / 1000, pos.x())])[-5:]
        self.controller.handle_drag(DragGestureValue.from_locations(GesturePhase.CHANGED, self.start_pos, (pos.x(), pos.y()), self._velocity()))
        self.update()

    def mouseReleaseEvent(self, event):
        if event.button() != Qt.MouseButton.LeftButton or self.start_pos is None:
            return
        pos = event.position()
        self.controller.handle_drag(DragGestureValue.from_locations(GesturePhase.ENDED, self.start_pos, (pos.x(), pos.y()), self._velocity()))
        self.start_pos = None
        self._follow_animation()

    def _velocity(self) -> float:
        if len(self.samples) < 2:
            return 0.0
        (t0, x0), (t1, x1) = self.samples[0], self.samples[-1]
        return (x1 - x0) / (t1 - t0) if t1 > t0 else 0.0

    def _follow_animation(self) -> None:
        if self.repaint_handle is not None and self.repaint_handle.active:
            return

        def tick(dt: float) -> None:
            self.update()
            if self.controller.state in (ControllerState.IDLE, ControllerState.DRAGGING):
                self.repaint_handle.cancel()

        self.repaint_handle = self.frame_source.schedule(tick)


class MyWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.signals = RulerSignals(value=5.0, parent=self)
        config = RulerConfig(bounds=(0, 20), step=1, snap=Mark.FRACTION, tick=Mark.UNIT)
        self.ruler = SlidingRulerWidget(self.signals, config, RulerStyle(cell_width=80, fractions=10))

        self.label = QLabel("5.0")
        self.signals.valueChanged.connect(lambda value: self.label.setText(f"{value:.2f}"))
        self.signals.boundaryMet.connect(lambda: self.statusBar().showMessage("Boundary", 500))

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.addWidget(self.label, alignment=Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.ruler)
        self.setCentralWidget(central)
        self.resize(600, 140)


if __name__ == "__main__":
    app = QApplication([])
    window = MyWindow()
    window.show()
    app.exec()
