"""
Buffer subsystem - logical bitmaps and frame packing.

Modules:
    framebuffer: Caller-side 1-bit bitmap with Pillow conversion
    packer: Rotation and bit packing into the panel's frame layout
"""
from .framebuffer import LogicalImage, BLACK, WHITE
from .packer import pack, WIDTH, HEIGHT, BUFFER_SIZE

__all__ = [
    "LogicalImage",
    "pack",
    "BLACK",
    "WHITE",
    "WIDTH",
    "HEIGHT",
    "BUFFER_SIZE",
]
