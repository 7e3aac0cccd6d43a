"""
Display driver layer.
"""
from .state import DisplayState, DriverState, RefreshMode
from .base import DisplayDriver
from .epd1in02 import EPD1in02
from .lut import LUT_SIZE, waveform

__all__ = [
    "DisplayState",
    "DriverState",
    "RefreshMode",
    "DisplayDriver",
    "EPD1in02",
    "LUT_SIZE",
    "waveform",
]
