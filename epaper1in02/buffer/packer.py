"""
Packer - LogicalImage to Device Buffer
======================================
Converts a logical bitmap into the panel's native frame layout.

The panel scans columns, not rows: logical pixel (x, y) lands at
physical column WIDTH - x - 1, row y. Physical pixels are packed one
bit each, MSB first, HEIGHT pixels per column. A set bit is white.
"""
from ..errors import ImageSizeError
from .framebuffer import BLACK, LogicalImage

# Panel geometry in logical orientation
WIDTH = 128
HEIGHT = 80
BUFFER_SIZE = WIDTH * HEIGHT // 8  # 1280


def pack(image) -> bytes:
    """
    Pack a logical image into a device buffer.

    Pure and deterministic: the image is only read.

    Args:
        image: LogicalImage, or a Pillow image (converted first)

    Returns:
        BUFFER_SIZE bytes in physical scan order

    Raises:
        ImageSizeError: If the image is not WIDTH x HEIGHT
    """
    image = as_logical(image)
    if image.size != (WIDTH, HEIGHT):
        raise ImageSizeError((WIDTH, HEIGHT), image.size)

    buf = bytearray(b'\xff' * BUFFER_SIZE)
    get_pixel = image.get_pixel
    for y in range(HEIGHT):
        mask = ~(0x80 >> (y % 8)) & 0xFF
        for x in range(WIDTH):
            if get_pixel(x, y) == BLACK:
                col = WIDTH - x - 1
                buf[(col * HEIGHT + y) // 8] &= mask
    return bytes(buf)


def as_logical(image) -> LogicalImage:
    """Accept a LogicalImage as-is, convert anything Pillow-like."""
    if isinstance(image, LogicalImage):
        return image
    if hasattr(image, "convert"):
        return LogicalImage.from_image(image)
    raise TypeError(f"Expected LogicalImage or PIL image, got {type(image).__name__}")
