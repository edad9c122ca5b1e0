# protocol/core/frames/__init__.py

from .base import CrsfFrame
from .command import CommandFrame
from .response import DeviceInfo, ParameterChunk, ParameterEntry, OPTION_SENTINEL

__all__ = [
    "CrsfFrame",
    "CommandFrame",
    "DeviceInfo",
    "ParameterChunk",
    "ParameterEntry",
    "OPTION_SENTINEL",
]
