"""
1.02" EPD Library
=================
A driver library for the Waveshare 1.02" (128x80) black/white e-paper
panel on Linux single-board computers, using Adafruit Blinka for GPIO
and SPI.

Architecture
------------
The library is organized into layers:

    EPD1in02            Panel protocol and lifecycle
       │
       ├── pack()           LogicalImage -> rotated device frame
       │      │
       │      └── LogicalImage   Caller-side 1-bit bitmap
       │
       └── SPIDevice        Pins, SPI writes, busy polling
              │
              └── byte_view()    Uniform payload views

Quick Start
-----------
    from epaper1in02 import EPD1in02, LogicalImage

    with EPD1in02.create() as epd:
        epd.on()
        epd.clear_screen()
        img = LogicalImage(epd.WIDTH, epd.HEIGHT)
        img.fill_rect(0, 0, 64, 40)
        epd.display(img)

Advanced Usage
--------------
    # Dependency injection for testing or custom wiring
    from epaper1in02.hardware import SPIDevice
    from epaper1in02.drivers import EPD1in02

    spi = SPIDevice.from_board({"rst": "D5", ...})
    epd = EPD1in02(spi)

Module Structure
----------------
    epaper1in02/
    ├── config.py            Pin configuration
    ├── errors.py            Exception taxonomy
    ├── buffer/
    │   ├── framebuffer.py   LogicalImage
    │   └── packer.py        Frame packing
    ├── drivers/
    │   ├── base.py          DisplayDriver protocol
    │   ├── epd1in02.py      Panel driver
    │   ├── commands.py      Command constants
    │   ├── sequences.py     Register scripts and timings
    │   ├── state.py         Driver state machine
    │   └── lut.py           Waveform look-up tables
    └── hardware/
        ├── spi.py           SPI communication layer
        └── payload.py       Byte views
"""
import logging

# Buffer classes
from .buffer import LogicalImage, pack, BLACK, WHITE

# Hardware layer
from .hardware import SPIDevice

# Driver layer
from .drivers import EPD1in02, DisplayDriver, DisplayState, DriverState, RefreshMode

from .errors import (
    EPDError,
    AcquisitionError,
    TransportError,
    BusyTimeoutError,
    ImageSizeError,
    InvalidStateError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Driver
    "EPD1in02",
    "DisplayDriver",
    "DisplayState",
    "DriverState",
    "RefreshMode",
    # Hardware
    "SPIDevice",
    # Graphics
    "LogicalImage",
    "pack",
    # Colors
    "BLACK",
    "WHITE",
    # Errors
    "EPDError",
    "AcquisitionError",
    "TransportError",
    "BusyTimeoutError",
    "ImageSizeError",
    "InvalidStateError",
]

__version__ = "0.1.0"
