"""
LogicalImage - Caller-Side 1-Bit Bitmap
=======================================
A WIDTH x HEIGHT monochrome image in the panel's logical orientation.

The caller draws into it (or converts a Pillow image into it); the
driver only reads it when packing a frame. Storage is row-major,
MSB first, 1 = white.
"""
from PIL import Image

# =============================================================================
# Color Constants
# =============================================================================

BLACK = 0
WHITE = 1

# =============================================================================
# Bit Manipulation Constants
# =============================================================================

_BITS_PER_BYTE = 8
_BYTE_MASK = 0xFF

# Byte literals for fast buffer slice filling
_FILL_WHITE = b'\xff'  # All bits set
_FILL_BLACK = b'\x00'  # No bits set

_BIT_MASKS = tuple(1 << (7 - i) for i in range(_BITS_PER_BYTE))
_INV_MASKS = tuple(~(1 << (7 - i)) & _BYTE_MASK for i in range(_BITS_PER_BYTE))


class LogicalImage:
    """
    1-bit bitmap of fixed size.

    Out-of-range writes are ignored and out-of-range reads return WHITE,
    so drawing code can clip freely.
    """

    def __init__(self, width: int, height: int, color: int = WHITE):
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        self.width = width
        self.height = height
        self._row_bytes = (width + 7) // 8
        self._buffer = bytearray(self._row_bytes * height)
        self.clear(color)

    @classmethod
    def from_image(cls, image: "Image.Image") -> "LogicalImage":
        """
        Convert a Pillow image of any mode.

        The image is converted to grayscale ("L") without dithering; only
        luminance 0 maps to BLACK, every other level to WHITE.
        """
        gray = image.convert("L")
        width, height = gray.size
        out = cls(width, height)
        pixels = gray.load()
        for y in range(height):
            for x in range(width):
                if pixels[x, y] == 0:
                    out._set(x, y, BLACK)
        return out

    def to_image(self) -> "Image.Image":
        """Render as a Pillow mode "1" image (for previews and tests)."""
        return Image.frombytes("1", (self.width, self.height), bytes(self._buffer))

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    @property
    def buffer(self) -> bytearray:
        return self._buffer

    # =========================================================================
    # Pixel Ops
    # =========================================================================

    def _set(self, x: int, y: int, color: int) -> None:
        idx = y * self._row_bytes + (x >> 3)
        if color: self._buffer[idx] |= _BIT_MASKS[x & 7]
        else: self._buffer[idx] &= _INV_MASKS[x & 7]

    def pixel(self, x: int, y: int, color: int = BLACK) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height): return
        self._set(x, y, color)

    def get_pixel(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height): return WHITE
        idx = y * self._row_bytes + (x >> 3)
        return WHITE if (self._buffer[idx] & _BIT_MASKS[x & 7]) else BLACK

    # =========================================================================
    # Buffer Ops
    # =========================================================================

    def clear(self, color: int = WHITE) -> None:
        """Fill the whole image with one color."""
        fill = _FILL_WHITE if color else _FILL_BLACK
        self._buffer[:] = fill * len(self._buffer)

    def fill_rect(self, x: int, y: int, w: int, h: int, color: int = BLACK) -> None:
        """Fill a rectangle, clipped to the image."""
        x0, y0 = max(x, 0), max(y, 0)
        x1, y1 = min(x + w, self.width), min(y + h, self.height)
        for py in range(y0, y1):
            for px in range(x0, x1):
                self._set(px, py, color)

    def __eq__(self, other) -> bool:
        if not isinstance(other, LogicalImage):
            return NotImplemented
        return self.size == other.size and self._buffer == other._buffer

    def __repr__(self) -> str:
        return f"LogicalImage({self.width}x{self.height})"
