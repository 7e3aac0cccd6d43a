"""
1.02" EPD Sequences & Configuration Constants
=============================================
Register scripts and timing values used by the panel driver.

Each script entry is (command, data) where data is None or the
parameter bytes sent in one data frame after the command.
"""
from . import commands as CMD

# =============================================================================
# Power-On Register Script
# =============================================================================
# Written after the reset pulse, before the waveform tables.
# Multi-byte parameters go out in one D/C-high transfer; the panel latches
# them the same as one write per byte.
INIT_SEQUENCE = (
    (CMD.CMD_VENDOR_D2, b"\x3f"),
    (CMD.CMD_PANEL_SETTING, b"\x6f"),            # LUT from register
    (CMD.CMD_POWER_SETTING, b"\x03\x00\x2b\x2b"),
    (CMD.CMD_CHARGE_PUMP, b"\x3f"),
    (CMD.CMD_LUT_OPTION, b"\x00\x00"),           # XON off, LUT options
    (CMD.CMD_PLL, b"\x17"),                      # 50Hz
    (CMD.CMD_VCOM_INTERVAL, b"\x57"),
    (CMD.CMD_TCON, b"\x22"),
    (CMD.CMD_RESOLUTION, b"\x50\x80"),           # 80 gates x 128 sources
    (CMD.CMD_VCOM_DC, b"\x12"),                  # -1V
    (CMD.CMD_POWER_SAVING, b"\x33"),
)

# =============================================================================
# Shutdown Register Script
# =============================================================================
# Border floating, then power off. BUSY must clear before deep sleep.

POWER_OFF_SEQUENCE = (
    (CMD.CMD_VCOM_INTERVAL, b"\xf7"),
    (CMD.CMD_POWER_OFF, None),
)

DEEP_SLEEP_CHECK = 0xA5       # Check code required by deep sleep

# =============================================================================
# Frame Fills (1 = white)
# =============================================================================

FILL_WHITE = 0xFF
FILL_BLACK = 0x00

# =============================================================================
# Timing (milliseconds)
# =============================================================================

REFRESH_SETTLE_MS = 10        # After 0x12, before polling BUSY
POWER_DOWN_MS = 2000          # After deep sleep, before cutting power
