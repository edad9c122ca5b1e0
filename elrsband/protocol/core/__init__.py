# protocol/core/__init__.py

from .frames import CrsfFrame, CommandFrame, DeviceInfo, ParameterChunk, ParameterEntry
from .parser import FrameParser

__all__ = [
    "CrsfFrame", "CommandFrame",
    "DeviceInfo", "ParameterChunk", "ParameterEntry",
    "FrameParser",
]
