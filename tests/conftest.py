"""
Shared fixtures: fake Blinka pins, a fake SPI bus and a fake clock.

Every pin write, busy read and SPI transfer is appended to one ordered
log so tests can assert on the exact wire sequence.
"""
import pytest

from epaper1in02.drivers import epd1in02 as epd_module
from epaper1in02.drivers.epd1in02 import EPD1in02
from epaper1in02.hardware import spi as spi_module
from epaper1in02.hardware.spi import SPIDevice


class FakeClock:
    """Stands in for the time module: sleeping advances monotonic()."""

    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def monotonic(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


class FakePin:
    def __init__(self, name, log):
        self.name = name
        self.log = log
        self.direction = None
        self._value = False

    @property
    def value(self):
        return self._value

    @value.setter
    def value(self, level):
        self._value = bool(level)
        self.log.append((self.name, bool(level)))

    def deinit(self):
        self.log.append(("deinit", self.name))


class FakeBusyPin(FakePin):
    """Input pin replaying scripted levels, then reporting idle (HIGH)."""

    def __init__(self, name, log):
        super().__init__(name, log)
        self.script = []

    @property
    def value(self):
        self.log.append(("read", self.name))
        if self.script:
            return self.script.pop(0)
        return True

    @value.setter
    def value(self, level):
        raise AssertionError("busy pin is input only")


class FakeSPI:
    def __init__(self, log):
        self.log = log
        self.fail = False
        self.locked = False

    def try_lock(self):
        if self.locked:
            return False
        self.locked = True
        return True

    def unlock(self):
        self.locked = False

    def configure(self, **kwargs):
        self.log.append(("configure", kwargs))

    def write(self, buf):
        if self.fail:
            raise OSError(5, "Input/output error")
        self.log.append(("spi", bytes(buf)))

    def deinit(self):
        self.log.append(("deinit", "spi"))


class Bus:
    """Fake hardware bundle around one SPIDevice."""

    def __init__(self):
        self.log = []
        self.spi = FakeSPI(self.log)
        self.rst = FakePin("rst", self.log)
        self.dc = FakePin("dc", self.log)
        self.busy = FakeBusyPin("busy", self.log)
        self.pwr = FakePin("pwr", self.log)
        self.device = SPIDevice(self.spi, self.rst, self.dc, self.busy, self.pwr)

    def frames(self, start=0):
        """Decode the log into (kind, bytes) frames using the D/C level."""
        out = []
        dc = None
        for entry in self.log[start:]:
            if entry[0] == "dc":
                dc = entry[1]
            elif entry[0] == "spi":
                out.append(("data" if dc else "cmd", entry[1]))
        return out

    def commands(self, start=0):
        return [f[1][0] for f in self.frames(start) if f[0] == "cmd"]

    def mark(self):
        return len(self.log)


@pytest.fixture
def clock(monkeypatch):
    fake = FakeClock()
    monkeypatch.setattr(spi_module, "time", fake)
    monkeypatch.setattr(epd_module, "time", fake)
    return fake


@pytest.fixture
def bus(clock):
    return Bus()


@pytest.fixture
def epd(bus):
    driver = EPD1in02(bus.device)
    yield driver
    # Power down while the fake clock is still patched in
    if not driver.released:
        bus.spi.fail = False
        driver.off()


@pytest.fixture
def idle_epd(epd, bus):
    epd.on()
    return epd
