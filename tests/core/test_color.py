import numpy as np
import pytest

from fbdraw.core.color import packed_to_rgb24, parse_color, rgb, unpack_rgb


def test_rgb_packs_channels_and_clamps():
    assert rgb(255, 0, 0) == 0xFF0000
    assert rgb(0, 255, 0) == 0x00FF00
    assert rgb(0, 0, 255) == 0x0000FF
    assert rgb(300, -5, 128) == 0xFF0080


def test_unpack_rgb_ignores_upper_byte():
    assert unpack_rgb(0x123456) == (0x12, 0x34, 0x56)
    assert unpack_rgb(0xFF123456) == (0x12, 0x34, 0x56)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0x102030, 0x102030),
        ("#102030", 0x102030),
        ("0x102030", 0x102030),
        ("  #ABCDEF ", 0xABCDEF),
        ([16, 32, 48], 0x102030),
        ((255, 255, 255), 0xFFFFFF),
    ],
)
def test_parse_color_accepts_supported_forms(value, expected: int):
    assert parse_color(value) == expected


@pytest.mark.parametrize("value", [-1, 0x1000000, "#12345", "#GGGGGG", [1, 2], [0, 0, 256], None, True, 1.5])
def test_parse_color_rejects_invalid_values(value):
    with pytest.raises(ValueError):
        parse_color(value)


def test_packed_to_rgb24_keeps_top_row_first():
    pixels = np.array([0xFF0000, 0x00FF00, 0x0000FF, 0xFFFFFF, 0x000000, 0x808080], dtype=np.uint32)

    out = packed_to_rgb24(pixels, 3, 2)

    assert out.shape == (2, 3, 3)
    assert out.dtype == np.uint8
    assert out[0, 0].tolist() == [255, 0, 0]
    assert out[0, 2].tolist() == [0, 0, 255]
    assert out[1, 0].tolist() == [255, 255, 255]
    assert out[1, 2].tolist() == [128, 128, 128]


def test_packed_to_rgb24_rejects_size_mismatch():
    with pytest.raises(ValueError):
        packed_to_rgb24(np.zeros(5, dtype=np.uint32), 2, 2)
