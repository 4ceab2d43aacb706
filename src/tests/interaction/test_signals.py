import unittest

from PySide6.QtCore import QCoreApplication

from sliding_ruler import ManualFrameSource, RulerConfig, RulerSignals, RulerStyle, SlidingRulerController
from sliding_ruler.interaction import DragGestureValue, GesturePhase


class TestRulerSignals(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app = QCoreApplication.instance() or QCoreApplication([])

    def setUp(self):
        self.signals = RulerSignals(value=4.5)
        self.values = []
        self.editing = []
        self.boundaries = []
        self.signals.valueChanged.connect(self.values.append)
        self.signals.editingChanged.connect(self.editing.append)
        self.signals.boundaryMet.connect(lambda: self.boundaries.append(self.signals.value()))

    def test_set_value_emits_on_change_only(self):
        self.signals.setValue(4.5)
        self.signals.setValue(3)
        self.assertEqual(self.values, [3.0])
        self.assertEqual(self.signals.binding().value, 3.0)

    def test_controller_notifications(self):
        source = ManualFrameSource()
        controller = SlidingRulerController(
            self.signals.binding(),
            RulerConfig(bounds=(0, 5)),
            RulerStyle(cell_width=60),
            frame_source=source,
            **self.signals.callbacks(),
        )
        controller.handle_drag(DragGestureValue(GesturePhase.BEGAN))
        controller.handle_drag(DragGestureValue(GesturePhase.CHANGED, -15))
        controller.handle_drag(DragGestureValue(GesturePhase.CHANGED, -60))
        controller.handle_drag(DragGestureValue(GesturePhase.ENDED, -60))
        source.run_until_idle()

        self.assertEqual(self.values, [4.75, 5.0])
        self.assertEqual(self.boundaries, [5.0])
        self.assertEqual(self.editing, [True, False])


if __name__ == '__main__':
    unittest.main()
