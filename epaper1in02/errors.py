"""
Errors - Exception Taxonomy for the EPD Driver
==============================================
Every failure the driver raises derives from EPDError, and also from the
builtin exception a caller would naturally catch for it.

    AcquisitionError    Pin or SPI bus could not be acquired (fatal)
    TransportError      SPI write failed, panel state now unknown (fatal)
    BusyTimeoutError    Bounded busy wait expired (recoverable)
    ImageSizeError      Logical image has the wrong dimensions (caller error)
    InvalidStateError   Operation requested while the panel is not idle
"""


class EPDError(Exception):
    """Base class for all driver errors."""


class AcquisitionError(EPDError, RuntimeError):
    """A control pin or the SPI bus could not be claimed."""


class TransportError(EPDError, RuntimeError):
    """An SPI write failed. No retry is attempted."""


class BusyTimeoutError(EPDError, TimeoutError):
    """The BUSY line stayed low past the requested deadline."""

    def __init__(self, timeout: float, operation: str | None = None):
        self.timeout = timeout
        self.operation = operation
        op_str = f" during {operation}" if operation else ""
        super().__init__(f"EPD busy timeout{op_str} (>{timeout}s)")


class ImageSizeError(EPDError, ValueError):
    """A logical image does not match the panel geometry."""

    def __init__(self, expected: tuple, actual: tuple):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Image must be {expected[0]}x{expected[1]}, got {actual[0]}x{actual[1]}"
        )


class InvalidStateError(EPDError, RuntimeError):
    """The panel cannot accept the operation in its current state."""
