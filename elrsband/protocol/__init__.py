# protocol/__init__.py

# Core classes
from .core import CrsfFrame, CommandFrame, DeviceInfo, ParameterChunk, ParameterEntry, FrameParser

__all__ = [
    "CrsfFrame", "CommandFrame",
    "DeviceInfo", "ParameterChunk", "ParameterEntry",
    "FrameParser"]
