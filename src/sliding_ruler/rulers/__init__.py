from .mapper import ValueOffsetMapper
from .cells import CellWindow, RulerCell

__all__ = ["ValueOffsetMapper", "CellWindow", "RulerCell"]
