"""
Payload - Uniform Byte Views for SPI Writes
===========================================
Commands and data reach the bus as one of several shapes:

    int               A single opcode or parameter byte
    bytes             Immutable buffers (LUT tables, fixed fills)
    bytearray         Owned, mutable buffers (packed frames)
    memoryview        Borrowed slices of a larger buffer
    tuple / list      A handful of parameter bytes

byte_view() turns any of these into a read-only memoryview so the
transport has a single write path.
"""

from typing import Union

ByteSource = Union[int, bytes, bytearray, memoryview, tuple, list]


def byte_view(payload: ByteSource) -> memoryview:
    """
    Return an immutable byte view of a payload.

    Args:
        payload: int (0-255), bytes, bytearray, memoryview, or a
            tuple/list of ints

    Returns:
        Read-only memoryview over the payload bytes

    Raises:
        TypeError: If the payload shape is not supported
        ValueError: If an int is outside 0-255
    """
    if isinstance(payload, bool):
        raise TypeError("bool is not a byte payload")
    if isinstance(payload, int):
        return memoryview(bytes((_check_byte(payload),)))
    if isinstance(payload, memoryview):
        if payload.format != "B" or payload.ndim != 1:
            payload = payload.cast("B")
        return payload.toreadonly()
    if isinstance(payload, (bytes, bytearray)):
        return memoryview(payload).toreadonly()
    if isinstance(payload, (tuple, list)):
        return memoryview(bytes(_check_byte(b) for b in payload))
    raise TypeError(f"Unsupported payload type: {type(payload).__name__}")


def _check_byte(value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"Byte value out of range: {value}")
    return value
