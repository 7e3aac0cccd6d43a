"""
SPIDevice - Low-Level SPI Communication for the 1.02" EPD
=========================================================
Handles all direct hardware interaction: SPI bus, GPIO pins, timing.

This class encapsulates:
- SPI bus acquisition and configuration (4 MHz, mode 0)
- GPIO pin management (RST, DC, BUSY, PWR, optional CS)
- Hardware reset and power-enable sequences
- Busy polling, unbounded or with a deadline

Separating this from the display driver allows:
- Easier testing (fake pins and bus behind the same attributes)
- Cleaner driver code (focus on the panel protocol)
"""
import logging
import time

from typing import TYPE_CHECKING

from ..config import SPI_BAUDRATE, SPI_PHASE, SPI_POLARITY, load_pin_config
from ..errors import AcquisitionError, BusyTimeoutError, TransportError
from .payload import ByteSource, byte_view

if TYPE_CHECKING:
    from digitalio import DigitalInOut
    from busio import SPI

logger = logging.getLogger(__name__)

_REQUIRED_PINS = ("sck", "mosi", "rst", "dc", "busy", "pwr")


class SPIDevice:
    """
    Low-level SPI communication handler for the panel controller.

    Owns the SPI bus and the control pins for the lifetime of the
    driver. Provides command/data writes and busy polling.

    Attributes:
        BUSY_QUERY: Command that refreshes the BUSY line (0x71)
        POLL_INTERVAL_MS: Pause between busy polls
        RESET_HIGH_MS: RST high time before and after the pulse
        RESET_LOW_MS: RST low pulse width
    """
    BUSY_QUERY = 0x71
    POLL_INTERVAL_MS = 50
    RESET_HIGH_MS = 200
    RESET_LOW_MS = 2

    def __init__(
        self,
        spi: "SPI",
        rst: "DigitalInOut",
        dc: "DigitalInOut",
        busy: "DigitalInOut",
        pwr: "DigitalInOut",
        cs: "DigitalInOut | None" = None,
    ):
        """
        Initialize the SPI device from already-acquired hardware.

        Args:
            spi: Configured SPI bus instance
            rst: Reset pin (output)
            dc: Data/Command pin (output, low=command, high=data)
            busy: Busy status pin (input, low when busy)
            pwr: Panel power enable pin (output)
            cs: Chip Select pin (active low), None if the bus drives CE0
        """
        self.spi = spi
        self.rst = rst
        self.dc = dc
        self.busy = busy
        self.pwr = pwr
        self.cs = cs
        self._released = False

    @classmethod
    def from_board(cls, pins: dict | None = None) -> "SPIDevice":
        """
        Create SPIDevice using board pin definitions.

        Pin names are Blinka board attributes ("D17", "SCK", ...). The
        map is laid over config.load_pin_config(), so a partial map only
        overrides the roles it names. Every role except "cs" is required.

        Args:
            pins: Role -> board pin name mapping

        Returns:
            Configured SPIDevice instance

        Raises:
            AcquisitionError: If any pin or the bus cannot be acquired
        """
        pins = {**load_pin_config(), **(pins or {})}
        missing = [role for role in _REQUIRED_PINS if pins.get(role) is None]
        if missing:
            raise AcquisitionError(f"No board pin given for {', '.join(missing)}")

        try:
            import board
            import busio
            import digitalio
        except (ImportError, NotImplementedError) as e:
            raise AcquisitionError(f"No GPIO platform available: {e}") from e

        def resolve(role):
            name = pins.get(role)
            if name is None:
                return None
            try:
                return getattr(board, name)
            except AttributeError:
                raise AcquisitionError(f"Unknown board pin {name!r} for {role}") from None

        def output(role, value):
            pin = digitalio.DigitalInOut(resolve(role))
            pin.direction = digitalio.Direction.OUTPUT
            pin.value = value
            return pin

        claimed = []
        try:
            # Initialize SPI bus
            spi = busio.SPI(resolve("sck"), MOSI=resolve("mosi"))
            claimed.append(spi)
            start = time.monotonic()
            while not spi.try_lock():
                if time.monotonic() - start > 1.0:
                    raise AcquisitionError("SPI lock timeout during initialization")
            spi.configure(baudrate=SPI_BAUDRATE, phase=SPI_PHASE, polarity=SPI_POLARITY)
            spi.unlock()

            # Initialize GPIO pins
            rst = output("rst", True)   # Not in reset
            claimed.append(rst)
            dc = output("dc", True)     # Default to data mode
            claimed.append(dc)
            pwr = output("pwr", False)  # Panel unpowered until on()
            claimed.append(pwr)

            busy = digitalio.DigitalInOut(resolve("busy"))
            claimed.append(busy)
            busy.direction = digitalio.Direction.INPUT

            cs = None
            if pins.get("cs"):
                cs = output("cs", True)  # Deselected (active low)
                claimed.append(cs)
        except AcquisitionError:
            _release(claimed)
            raise
        except Exception as e:
            _release(claimed)
            raise AcquisitionError(f"Cannot acquire EPD hardware: {e}") from e

        logger.debug("acquired EPD pins %s", pins)
        return cls(spi, rst, dc, busy, pwr, cs)

    def deinit(self):
        """Release all hardware resources."""
        if self._released:
            return
        self._released = True
        _release([self.spi, self.rst, self.dc, self.busy, self.pwr, self.cs])
        logger.debug("released EPD pins")

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.deinit()
        return False

    @property
    def released(self) -> bool:
        return self._released

    # =========================================================================
    # Writes
    # =========================================================================

    def _write(self, payload):
        view = byte_view(payload)
        while not self.spi.try_lock():
            pass
        try:
            if self.cs is not None:
                self.cs.value = False
            try:
                self.spi.write(view)
            except (OSError, RuntimeError, ValueError) as e:
                logger.error("spi send buf fail (%d bytes): %r", len(view), e)
                raise TransportError(f"SPI write of {len(view)} bytes failed: {e}") from e
            finally:
                if self.cs is not None:
                    self.cs.value = True
        finally:
            self.spi.unlock()

    def send_command(self, cmd: ByteSource):
        """Send a command frame (D/C low)."""
        self.dc.value = False
        self._write(cmd)

    def send_data(self, data: ByteSource):
        """Send a data frame (D/C high)."""
        self.dc.value = True
        self._write(data)

    def write_command(self, cmd: ByteSource, data: ByteSource | None = None):
        """
        Send a command and optional data to the display.

        The D/C pin distinguishes the two frames:
          - D/C LOW: Byte is a command
          - D/C HIGH: Bytes are data for the previous command

        Args:
            cmd: Command byte (0x00-0xFF)
            data: None, int, tuple of ints, or bytes/bytearray/memoryview
        """
        self.send_command(cmd)
        if data is not None:
            self.send_data(data)

    # =========================================================================
    # Control pins
    # =========================================================================

    def hardware_reset(
        self,
        high_ms: float = RESET_HIGH_MS,
        low_ms: float = RESET_LOW_MS,
    ):
        """
        Pulse the RST pin: high, low, high.

        Args:
            high_ms: Settle time before and after the pulse
            low_ms: Reset pulse duration
        """
        self.rst.value = True
        time.sleep(high_ms / 1000)
        self.rst.value = False
        time.sleep(low_ms / 1000)
        self.rst.value = True
        time.sleep(high_ms / 1000)

    def power(self, on: bool):
        """Drive the panel power-enable pin."""
        self.pwr.value = bool(on)

    # =========================================================================
    # Busy polling
    # =========================================================================

    def is_busy(self) -> bool:
        """
        Query the controller and sample the BUSY line.

        The busy query command must precede every read. BUSY is LOW
        while the panel is driving a waveform, HIGH when idle.
        """
        self.send_command(self.BUSY_QUERY)
        return not self.busy.value

    def wait_ready(
        self,
        timeout: float | None = None,
        operation: str | None = None,
    ) -> float:
        """
        Wait for the display to finish processing (BUSY goes high).

        With timeout=None the wait is unbounded; power and refresh
        sequences rely on this since they have no fallback.

        Args:
            timeout: Maximum wait time in seconds, or None
            operation: Optional operation name for error messages

        Returns:
            Time spent waiting in seconds

        Raises:
            BusyTimeoutError: If timeout exceeded
        """
        start = time.monotonic()
        if not self.is_busy():
            return 0.0

        interval = self.POLL_INTERVAL_MS / 1000
        if timeout is None:
            logger.debug("loop... busy await")
            while self.is_busy():
                time.sleep(interval)
            logger.debug("break loop... busy await")
        else:
            deadline = start + timeout
            while self.is_busy():
                if time.monotonic() > deadline:
                    logger.warning("spi await busy timeout%s",
                                   f" during {operation}" if operation else "")
                    raise BusyTimeoutError(timeout, operation)
                time.sleep(interval)
        return time.monotonic() - start


def _release(resources):
    for res in resources:
        if res is not None:
            res.deinit()
