import pytest

from enginecore.color import Color, pack_hex


def test_default_is_transparent_black():
    assert Color() == Color.from_hex(0)


def test_from_hex_full_white():
    assert Color.from_hex(0xFFFFFFFF) == Color(1.0, 1.0, 1.0, 1.0)


def test_from_hex_channel_order():
    color = Color.from_hex(0xFF00FF00)
    assert color.red == 1.0
    assert color.green == 0
    assert color.blue == 1.0
    assert color.alpha == 0


@pytest.mark.parametrize("value", [0, 0xFFFFFFFF, 0xFF00FF00, 0x00FF00FF, 0xFF000000])
def test_hex_round_trip(value):
    assert Color.from_hex(value).to_hex() == value


def test_pack_hex_layout():
    assert pack_hex(0xFF, 0x00, 0xFF, 0x00) == 0xFF00FF00


def test_pack_hex_wraps_to_32_bits():
    assert pack_hex(0x1FF, 0, 0, 0) == pack_hex(0xFF, 0, 0, 0)


@pytest.mark.parametrize("channels", [(0, 0, 0, 0), (12, 34, 56, 78), (255, 128, 1, 200)])
def test_from_bytes_matches_from_hex(channels):
    assert Color.from_bytes(*channels) == Color.from_hex(pack_hex(*channels))


def test_from_bytes_rejects_out_of_range():
    with pytest.raises(ValueError):
        Color.from_bytes(256, 0, 0, 0)
    with pytest.raises(ValueError):
        Color.from_bytes(0, 0, -1, 0)


def test_to_hex_single_channel():
    assert Color(1.0, 0.0, 0.0, 0.0).to_hex() == pack_hex(255, 0, 0, 0)
    assert Color(0.0, 0.0, 0.0, 1.0).to_hex() == pack_hex(0, 0, 0, 255)


def test_color_is_mutable():
    color = Color()
    color.green = 1.0
    assert color.to_hex() == pack_hex(0, 255, 0, 0)