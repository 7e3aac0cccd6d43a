"""
DisplayState - State Management for the EPD Driver
==================================================
State machine for the panel lifecycle.

Transitions are explicit methods on DriverState so the driver never
assigns states ad hoc, and illegal requests are rejected in one place.
"""
from ..errors import InvalidStateError


class DisplayState:
    """
    Display driver state enumeration.

    State Diagram:
        OFF --> POWERING_ON (on)
        POWERING_ON --> INITIALIZING (reset pulse done)
        INITIALIZING --> IDLE (power-on BUSY cleared)
        IDLE --> BUSY (display / clear)
        BUSY --> IDLE (refresh complete)
        any --> SHUTTING_DOWN --> OFF (off)
    """
    OFF = 0            # Unpowered, or powered down after off()
    POWERING_ON = 1    # Power pin high, reset pulse in progress
    INITIALIZING = 2   # Register script and LUT being written
    IDLE = 3           # Initialized, can accept display/clear
    BUSY = 4           # Frame transfer or refresh in progress
    SHUTTING_DOWN = 5  # Power-off / deep sleep sequence running

    _names = {
        0: "OFF",
        1: "POWERING_ON",
        2: "INITIALIZING",
        3: "IDLE",
        4: "BUSY",
        5: "SHUTTING_DOWN",
    }

    @classmethod
    def name(cls, state: int) -> str:
        """Get human-readable state name."""
        return cls._names.get(state, f"UNKNOWN({state})")


class RefreshMode:
    """
    Refresh mode enumeration.

    Selects which waveform tables are written during initialization.
    """
    FULL = 0     # Higher quality, clears ghosting
    PARTIAL = 1  # Faster, lower quality


class DriverState:
    """
    Complete driver state container.

    Attributes:
        state: Current DisplayState
        mode: RefreshMode of the loaded waveform, None before on()
        refresh_count: Refreshes since the last on()
    """

    def __init__(self, state: int = DisplayState.OFF):
        self.state = state
        self.mode = None
        self.refresh_count = 0

    def on_power_up(self):
        self.state = DisplayState.POWERING_ON
        self.mode = None
        self.refresh_count = 0

    def on_reset_complete(self):
        self.state = DisplayState.INITIALIZING

    def on_init_complete(self, mode: int):
        """Transition after the power-on BUSY wait succeeds."""
        self.state = DisplayState.IDLE
        self.mode = mode

    def begin_update(self, operation: str):
        """Enter BUSY for a display or clear. Only legal from IDLE."""
        if self.state != DisplayState.IDLE:
            raise InvalidStateError(
                f"Cannot {operation} while {DisplayState.name(self.state)}"
            )
        self.state = DisplayState.BUSY

    def on_update_complete(self):
        self.state = DisplayState.IDLE
        self.refresh_count += 1

    def on_shutdown(self):
        self.state = DisplayState.SHUTTING_DOWN

    def on_off(self):
        self.state = DisplayState.OFF
        self.mode = None

    @property
    def is_idle(self) -> bool:
        return self.state == DisplayState.IDLE

    @property
    def is_off(self) -> bool:
        return self.state == DisplayState.OFF

    def __repr__(self) -> str:
        return (
            f"DriverState("
            f"state={DisplayState.name(self.state)}, "
            f"mode={self.mode}, "
            f"refreshes={self.refresh_count})"
        )
