from .frame_source import FrameHandle, FrameSource, ManualFrameSource, QtFrameSource
from .vsynced_timer import VSyncedTimer

__all__ = ["FrameHandle", "FrameSource", "ManualFrameSource", "QtFrameSource", "VSyncedTimer"]
