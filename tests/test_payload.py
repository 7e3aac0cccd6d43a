import typing

import pytest

from epaper1in02.hardware.payload import ByteSource, byte_view
from epaper1in02.hardware.spi import SPIDevice


@pytest.mark.parametrize("payload,expected", [
    (0x71, b"\x71"),
    (0, b"\x00"),
    (b"\x03\x00\x2b\x2b", b"\x03\x00\x2b\x2b"),
    (bytearray(b"\xff\x00"), b"\xff\x00"),
    ((0x50, 0x80), b"\x50\x80"),
    ([0xA5], b"\xa5"),
])
def test_byte_view(payload, expected):
    view = byte_view(payload)
    assert isinstance(view, memoryview)
    assert view.readonly
    assert bytes(view) == expected


def test_borrowed_slice_is_not_copied():
    frame = bytearray(b"\x01\x02\x03\x04")
    view = byte_view(memoryview(frame)[1:3])
    assert bytes(view) == b"\x02\x03"
    frame[1] = 0x09
    assert bytes(view) == b"\x09\x03"


def test_view_cannot_modify_owner():
    frame = bytearray(4)
    view = byte_view(frame)
    with pytest.raises(TypeError):
        view[0] = 1


@pytest.mark.parametrize("payload", [256, -1, (1, 300)])
def test_out_of_range(payload):
    with pytest.raises(ValueError):
        byte_view(payload)


@pytest.mark.parametrize("payload", ["x", 1.0, None, True])
def test_unsupported(payload):
    with pytest.raises(TypeError):
        byte_view(payload)


def test_writers_accept_byte_sources():
    assert typing.get_type_hints(byte_view)["payload"] == ByteSource
    assert typing.get_type_hints(SPIDevice.send_command)["cmd"] == ByteSource
    assert typing.get_type_hints(SPIDevice.send_data)["data"] == ByteSource
