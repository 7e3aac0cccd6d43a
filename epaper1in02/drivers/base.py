"""
DisplayDriver - Abstract Base for EPD Drivers
=============================================
Defines the interface the panel driver implements, so application
code can be written against the lifecycle without knowing controller
details.
"""
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .state import DriverState


class DisplayDriver:
    """
    Abstract base class for e-paper display drivers.

    Properties:
        WIDTH: Logical display width in pixels
        HEIGHT: Logical display height in pixels
        BUFFER_SIZE: Device frame size in bytes
        state: Current DriverState
    """

    # Subclasses must define these
    WIDTH: int = 0
    HEIGHT: int = 0
    BUFFER_SIZE: int = 0

    def on(self, mode: int = 0):
        """
        Power the panel and run its initialization script.

        Args:
            mode: RefreshMode selecting the waveform tables
        """
        raise NotImplementedError

    def display(self, image) -> float:
        """
        Show a logical image with a full refresh.

        Returns:
            Refresh time in seconds
        """
        raise NotImplementedError

    def clear_screen(self) -> float:
        """Refresh the panel to solid white."""
        raise NotImplementedError

    def off(self):
        """Power down: deep sleep, then cut the power pin."""
        raise NotImplementedError

    def deinit(self):
        """Power down once and release hardware resources."""
        raise NotImplementedError

    @property
    def state(self) -> "DriverState":
        """Current driver state."""
        raise NotImplementedError
