"""
1.02" EPD Command Constants
===========================
Register addresses and command bytes for the 1.02" 128x80 panel
controller.

Organized by functional category for easier navigation.
"""

# =============================================================================
# Panel Configuration
# =============================================================================

CMD_PANEL_SETTING = 0x00      # Panel Setting - LUT source, scan direction
CMD_TCON = 0x60               # Gate/Source non-overlap period
CMD_RESOLUTION = 0x61         # Resolution Setting - source x gate
CMD_VENDOR_D2 = 0xD2          # Vendor register, set before panel setting

# =============================================================================
# Power Control
# =============================================================================

CMD_POWER_SETTING = 0x01      # Power Setting - VGH/VGL, VDH/VDL rails
CMD_POWER_OFF = 0x02          # Power OFF - BUSY low until complete
CMD_POWER_ON = 0x04           # Power ON - BUSY low until rails settle
CMD_CHARGE_PUMP = 0x06        # Booster Soft Start / charge pump
CMD_DEEP_SLEEP = 0x07         # Deep Sleep - requires check code 0xA5
CMD_POWER_SAVING = 0xE3       # Power Saving

# =============================================================================
# Waveform & Timing
# =============================================================================

CMD_LUT_W = 0x23              # Write W waveform table (42 bytes)
CMD_LUT_B = 0x24              # Write B waveform table (42 bytes)
CMD_LUT_OPTION = 0x2A         # XON and LUT options
CMD_PLL = 0x30                # Clock frequency (frame rate)
CMD_VCOM_INTERVAL = 0x50      # VCOM and data output interval
CMD_VCOM_DC = 0x82            # VCOM_DC level

# =============================================================================
# Display Update Sequence
# =============================================================================

CMD_DATA_START_1 = 0x10       # Write first (old) image buffer
CMD_DISPLAY_REFRESH = 0x12    # Trigger display refresh
CMD_DATA_START_2 = 0x13       # Write second (new) image buffer

# =============================================================================
# Status
# =============================================================================

CMD_BUSY_QUERY = 0x71         # Get Status - refreshes the BUSY line
