"""
LUT - Look-Up Tables for EPD Waveforms
======================================
Waveform tables written during initialization.

Available LUTs:
    FULL_LUT_W / FULL_LUT_B - full refresh, clears ghosting
    PART_LUT_W / PART_LUT_B - partial refresh, faster and lower quality

LUT Structure (42 bytes per polarity):
    - 7 groups x 6 bytes
    - Byte 0: voltage levels for the 4 phases (2 bits each)
    - Bytes 1-4: frame counts per phase
    - Byte 5: repeat count for the group
"""
from .state import RefreshMode

LUT_SIZE = 42

# =============================================================================
# Full Refresh
# =============================================================================

FULL_LUT_W = (
    b"\x60\x5a\x5a\x00\x00\x01"  # Group 0
    b"\x00\x00\x00\x00\x00\x00"  # Group 1
    b"\x00\x00\x00\x00\x00\x00"  # Group 2
    b"\x00\x00\x00\x00\x00\x00"  # Group 3
    b"\x00\x00\x00\x00\x00\x00"  # Group 4
    b"\x00\x00\x00\x00\x00\x00"  # Group 5
    b"\x00\x00\x00\x00\x00\x00"  # Group 6
)

FULL_LUT_B = (
    b"\x90\x5a\x5a\x00\x00\x01"  # Group 0
    b"\x00\x00\x00\x00\x00\x00"  # Group 1
    b"\x00\x00\x00\x00\x00\x00"  # Group 2
    b"\x00\x00\x00\x00\x00\x00"  # Group 3
    b"\x00\x00\x00\x00\x00\x00"  # Group 4
    b"\x00\x00\x00\x00\x00\x00"  # Group 5
    b"\x00\x00\x00\x00\x00\x00"  # Group 6
)

# =============================================================================
# Partial Refresh
# =============================================================================

PART_LUT_W = (
    b"\x60\x01\x01\x00\x00\x01"  # Group 0
    b"\x80\x1f\x00\x00\x00\x01"  # Group 1
    b"\x00\x00\x00\x00\x00\x00"  # Group 2
    b"\x00\x00\x00\x00\x00\x00"  # Group 3
    b"\x00\x00\x00\x00\x00\x00"  # Group 4
    b"\x00\x00\x00\x00\x00\x00"  # Group 5
    b"\x00\x00\x00\x00\x00\x00"  # Group 6
)

PART_LUT_B = (
    b"\x90\x01\x01\x00\x00\x01"  # Group 0
    b"\x40\x1f\x00\x00\x00\x01"  # Group 1
    b"\x00\x00\x00\x00\x00\x00"  # Group 2
    b"\x00\x00\x00\x00\x00\x00"  # Group 3
    b"\x00\x00\x00\x00\x00\x00"  # Group 4
    b"\x00\x00\x00\x00\x00\x00"  # Group 5
    b"\x00\x00\x00\x00\x00\x00"  # Group 6
)

_WAVEFORMS = {
    RefreshMode.FULL: (FULL_LUT_W, FULL_LUT_B),
    RefreshMode.PARTIAL: (PART_LUT_W, PART_LUT_B),
}


def waveform(mode: int) -> tuple[bytes, bytes]:
    """Return the (W, B) tables for a refresh mode."""
    try:
        return _WAVEFORMS[mode]
    except KeyError:
        raise ValueError(f"No waveform for refresh mode {mode!r}") from None
