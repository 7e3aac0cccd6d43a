"""
Hardware abstraction layer.

Modules:
    spi: Pin and SPI bus ownership, command/data writes, busy polling
    payload: Uniform byte views over command and data payloads
"""
from .spi import SPIDevice
from .payload import byte_view

__all__ = ["SPIDevice", "byte_view"]
