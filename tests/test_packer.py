import pytest
from PIL import Image

from epaper1in02 import BLACK, WHITE, ImageSizeError, LogicalImage, pack
from epaper1in02.buffer.packer import BUFFER_SIZE, HEIGHT, WIDTH


def blank(color=WHITE):
    return LogicalImage(WIDTH, HEIGHT, color)


def test_geometry():
    assert (WIDTH, HEIGHT) == (128, 80)
    assert BUFFER_SIZE == 1280


def test_all_white_sets_every_bit():
    buf = pack(blank(WHITE))
    assert len(buf) == BUFFER_SIZE
    assert buf == b"\xff" * BUFFER_SIZE


def test_all_black_clears_every_bit():
    buf = pack(blank(BLACK))
    assert len(buf) == BUFFER_SIZE
    assert buf == b"\x00" * BUFFER_SIZE


@pytest.mark.parametrize("x,y", [(0, 0), (127, 79), (5, 13), (64, 40), (127, 0), (0, 79)])
def test_single_black_pixel(x, y):
    img = blank()
    img.pixel(x, y, BLACK)
    buf = pack(img)

    index = ((WIDTH - x - 1) * HEIGHT + y) // 8
    mask = 0x80 >> (y % 8)
    assert buf[index] == 0xFF & ~mask
    others = buf[:index] + buf[index + 1:]
    assert others == b"\xff" * (BUFFER_SIZE - 1)


def test_row_maps_to_one_bit_per_column():
    img = blank()
    img.fill_rect(0, 3, WIDTH, 1, BLACK)
    buf = pack(img)
    # Row 3 lands in the first byte of each 10-byte column, bit 3 from MSB
    for col in range(WIDTH):
        assert buf[col * HEIGHT // 8] == 0xEF
    assert buf.count(0xFF) == BUFFER_SIZE - WIDTH


def test_pack_is_pure():
    img = blank()
    img.fill_rect(10, 10, 30, 20, BLACK)
    before = bytes(img.buffer)
    assert pack(img) == pack(img)
    assert bytes(img.buffer) == before


@pytest.mark.parametrize("size", [(80, 128), (127, 80), (128, 81), (8, 8)])
def test_size_mismatch_rejected(size):
    with pytest.raises(ImageSizeError) as exc:
        pack(LogicalImage(*size))
    assert isinstance(exc.value, ValueError)
    assert exc.value.actual == size


def test_pillow_image_matches_logical_image():
    pil = Image.new("1", (WIDTH, HEIGHT), 1)
    pil.putpixel((3, 4), 0)
    pil.putpixel((100, 70), 0)

    img = blank()
    img.pixel(3, 4, BLACK)
    img.pixel(100, 70, BLACK)

    assert pack(pil) == pack(img)


def test_pillow_grayscale_is_thresholded():
    pil = Image.new("L", (WIDTH, HEIGHT), 255)
    pil.putpixel((0, 0), 0)
    buf = pack(pil)
    assert buf.count(0xFF) == BUFFER_SIZE - 1


def test_pillow_midtones_stay_white():
    pil = Image.new("L", (WIDTH, HEIGHT), 100)
    assert pack(pil) == b"\xff" * BUFFER_SIZE


def test_pillow_only_zero_luminance_is_black():
    pil = Image.new("L", (WIDTH, HEIGHT), 1)
    pil.putpixel((7, 9), 0)
    img = blank()
    img.pixel(7, 9, BLACK)
    assert pack(pil) == pack(img)


def test_pillow_wrong_size_rejected():
    with pytest.raises(ImageSizeError):
        pack(Image.new("1", (HEIGHT, WIDTH), 1))


def test_unsupported_type():
    with pytest.raises(TypeError):
        pack(b"\xff" * BUFFER_SIZE)
