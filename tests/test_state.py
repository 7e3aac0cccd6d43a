import pytest

from epaper1in02 import DisplayState, DriverState, InvalidStateError, RefreshMode


def test_lifecycle():
    s = DriverState()
    assert s.is_off
    s.on_power_up()
    assert s.state == DisplayState.POWERING_ON
    s.on_reset_complete()
    assert s.state == DisplayState.INITIALIZING
    s.on_init_complete(RefreshMode.FULL)
    assert s.is_idle and s.mode == RefreshMode.FULL

    s.begin_update("display")
    assert s.state == DisplayState.BUSY
    s.on_update_complete()
    assert s.is_idle and s.refresh_count == 1

    s.on_shutdown()
    assert s.state == DisplayState.SHUTTING_DOWN
    s.on_off()
    assert s.is_off and s.mode is None


@pytest.mark.parametrize("state", [
    DisplayState.OFF,
    DisplayState.POWERING_ON,
    DisplayState.INITIALIZING,
    DisplayState.BUSY,
    DisplayState.SHUTTING_DOWN,
])
def test_update_only_from_idle(state):
    s = DriverState(state)
    with pytest.raises(InvalidStateError, match=DisplayState.name(state)):
        s.begin_update("clear screen")
    assert s.state == state


def test_names():
    assert DisplayState.name(DisplayState.IDLE) == "IDLE"
    assert DisplayState.name(42) == "UNKNOWN(42)"
    assert "IDLE" in repr(DriverState(DisplayState.IDLE))
