"""
EPD1in02 - 1.02" E-Paper Display Driver
=======================================
Driver for the 1.02" 128x80 black/white e-paper panel (Waveshare
1.02inch e-Paper Module) on a Linux SPI bus.

Architecture
------------
  - SPIDevice: Pins, SPI writes, busy polling
  - DriverState: Lifecycle state machine
  - EPD1in02: Panel protocol (init script, frames, power down)

The controller takes two frames per refresh:
  - DATA_START_1 (0x10): reference ("old") frame
  - DATA_START_2 (0x13): new frame
Both are 1280 bytes, one bit per pixel, 1 = white.

Power down is tied to the object's lifetime: off() runs exactly once,
whether called directly, through the context manager, or by the
finalizer when the driver is garbage collected.
"""
import logging
import time
import weakref

from typing import TYPE_CHECKING

from ..buffer.packer import BUFFER_SIZE, HEIGHT, WIDTH, pack
from ..errors import InvalidStateError
from .base import DisplayDriver
from .lut import waveform
from .state import DisplayState, DriverState, RefreshMode
from . import commands as CMD
from . import sequences as SEQ

if TYPE_CHECKING:
    from ..hardware.spi import SPIDevice

logger = logging.getLogger(__name__)


class EPD1in02(DisplayDriver):
    """
    1.02" E-Paper Display Driver.

    Example:
        from epaper1in02 import EPD1in02, LogicalImage

        with EPD1in02.create() as epd:
            epd.on()
            epd.clear_screen()
            img = LogicalImage(epd.WIDTH, epd.HEIGHT)
            img.fill_rect(10, 10, 40, 20)
            epd.display(img)
        # panel powered down and pins released here
    """
    WIDTH = WIDTH
    HEIGHT = HEIGHT
    BUFFER_SIZE = BUFFER_SIZE  # WIDTH * HEIGHT // 8

    def __init__(self, spi: "SPIDevice"):
        """
        Initialize the driver. The panel stays unpowered until on().

        Args:
            spi: SPIDevice owning the panel's pins and bus
        """
        self._spi = spi
        self._state = DriverState()
        self._finalizer = weakref.finalize(self, _teardown, spi, self._state)

    @classmethod
    def create(cls, pins: dict | None = None) -> "EPD1in02":
        """
        Factory method that acquires the board hardware.

        Args:
            pins: Role -> board pin name mapping (default: config)

        Raises:
            AcquisitionError: If pins or bus are unavailable
        """
        from ..hardware.spi import SPIDevice
        return cls(SPIDevice.from_board(pins))

    def off(self):
        """
        Power down the panel and release its pins.

        Sends the power-off script, waits for BUSY, enters deep sleep,
        waits 2 s, then drives the power pin low. Runs at most once per
        driver; later calls are no-ops.
        """
        self._finalizer()

    def deinit(self):
        """Release hardware resources (powers down first)."""
        self.off()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.off()
        return False

    # =========================================================================
    # Initialization
    # =========================================================================

    def on(self, mode: int = RefreshMode.FULL):
        """
        Power the panel and initialize it.

        Args:
            mode: RefreshMode whose waveform tables are loaded

        Raises:
            InvalidStateError: If the panel is not OFF or was released
        """
        if not self._finalizer.alive:
            raise InvalidStateError("Cannot turn on a released panel")
        if not self._state.is_off:
            raise InvalidStateError(
                f"Cannot turn on while {DisplayState.name(self._state.state)}"
            )
        lut_w, lut_b = waveform(mode)

        logger.debug("e-paper turn on...")
        self._state.on_power_up()
        self._spi.power(True)
        self._spi.hardware_reset()
        self._state.on_reset_complete()

        for cmd, data in SEQ.INIT_SEQUENCE:
            self._spi.write_command(cmd, data)
        self._write_waveform(lut_w, lut_b)

        self._spi.send_command(CMD.CMD_POWER_ON)
        self._spi.wait_ready(operation="power on")
        self._state.on_init_complete(mode)
        logger.debug("e-paper turn on.")

    def set_waveform(self, mode: int):
        """
        Load the waveform tables for a refresh mode.

        Applies to every refresh after this call.
        """
        if self._state.state not in (DisplayState.INITIALIZING, DisplayState.IDLE):
            raise InvalidStateError(
                f"Cannot load waveform while {DisplayState.name(self._state.state)}"
            )
        lut_w, lut_b = waveform(mode)
        self._write_waveform(lut_w, lut_b)
        self._state.mode = mode

    def _write_waveform(self, lut_w: bytes, lut_b: bytes):
        self._spi.write_command(CMD.CMD_LUT_W, lut_w)
        self._spi.write_command(CMD.CMD_LUT_B, lut_b)

    # =========================================================================
    # Public API
    # =========================================================================

    def display(self, image) -> float:
        """
        Display a logical image.

        Args:
            image: LogicalImage or Pillow image, WIDTH x HEIGHT

        Returns:
            Refresh time in seconds

        Raises:
            ImageSizeError: If the image size is wrong
            InvalidStateError: If the panel is not IDLE
        """
        data = pack(image)
        self._state.begin_update("display")

        logger.debug("e-paper starting display...")
        self._write_frames(bytes([SEQ.FILL_WHITE]) * self.BUFFER_SIZE, data)
        t = self._turn_on_display()
        self._state.on_update_complete()
        logger.debug("e-paper started display")
        return t

    def clear_screen(self) -> float:
        """Refresh the panel to solid white."""
        self._state.begin_update("clear screen")

        logger.debug("e-paper starting clear_screen...")
        self._write_frames(
            bytes([SEQ.FILL_BLACK]) * self.BUFFER_SIZE,
            bytes([SEQ.FILL_WHITE]) * self.BUFFER_SIZE,
        )
        t = self._turn_on_display()
        self._state.on_update_complete()
        logger.debug("e-paper started clear_screen")
        return t

    def wait_ready(self, timeout: float | None = None) -> float:
        """
        Block until the panel reports not busy.

        Args:
            timeout: Seconds before BusyTimeoutError, None to wait forever

        Returns:
            Time spent waiting in seconds
        """
        return self._spi.wait_ready(timeout=timeout, operation="wait ready")

    def _write_frames(self, old: bytes, new: bytes):
        self._spi.write_command(CMD.CMD_DATA_START_1, old)
        self._spi.write_command(CMD.CMD_DATA_START_2, new)

    def _turn_on_display(self) -> float:
        """Trigger the refresh and wait for it to finish."""
        self._spi.send_command(CMD.CMD_DISPLAY_REFRESH)
        time.sleep(SEQ.REFRESH_SETTLE_MS / 1000)
        return self._spi.wait_ready(operation="refresh")

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def state(self) -> DriverState:
        return self._state

    @property
    def is_idle(self) -> bool:
        return self._state.is_idle

    @property
    def released(self) -> bool:
        return not self._finalizer.alive


def _power_down(spi: "SPIDevice", state: DriverState):
    logger.debug("e-paper turn off...")
    state.on_shutdown()
    for cmd, data in SEQ.POWER_OFF_SEQUENCE:
        spi.write_command(cmd, data)
    spi.wait_ready(operation="power off")
    spi.write_command(CMD.CMD_DEEP_SLEEP, SEQ.DEEP_SLEEP_CHECK)
    time.sleep(SEQ.POWER_DOWN_MS / 1000)


def _teardown(spi: "SPIDevice", state: DriverState):
    # Holds no reference to the driver so the finalizer can fire on GC
    try:
        _power_down(spi, state)
    finally:
        try:
            spi.power(False)
            state.on_off()
            logger.debug("e-paper turn off.")
        finally:
            spi.deinit()
