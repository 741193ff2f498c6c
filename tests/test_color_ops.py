import pytest

from stylekit.design import color_ops as co
from stylekit.design.color_ops import Color
from stylekit.design import palette


def test_from_hex_variants():
    assert co.from_hex("FFFFFF") == Color(255, 255, 255, 255)
    assert co.from_hex("000000") == Color(0, 0, 0, 255)
    assert co.from_hex("#EFEFF4") == Color(0xEF, 0xEF, 0xF4)
    assert co.from_hex("12abef33") == Color(0x12, 0xAB, 0xEF, 0x33)


@pytest.mark.parametrize("bad", ["ZZZZZZ", "FFF", "#1234567", "0x1234", "+12345", "12_345", ""])
def test_from_hex_invalid_format(bad):
    with pytest.raises(co.InvalidFormatError):
        co.from_hex(bad)


def test_from_hex_rejects_non_string():
    with pytest.raises(co.InvalidFormatError):
        co.from_hex(0xFFFFFF)  # type: ignore[arg-type]


def test_from_packed_rgba():
    assert co.from_packed_rgba(0xFDE0DCFF) == Color(0xFD, 0xE0, 0xDC, 0xFF)
    assert co.from_packed_rgba(0x00000000) == Color(0, 0, 0, 0)
    with pytest.raises(co.InvalidRangeError):
        co.from_packed_rgba(0x1_0000_0000)
    with pytest.raises(co.InvalidRangeError):
        co.from_packed_rgba(-1)
    with pytest.raises(co.InvalidFormatError):
        co.from_packed_rgba("0xFFFFFFFF")  # type: ignore[arg-type]


def test_color_channel_validation():
    with pytest.raises(co.InvalidRangeError):
        Color(256, 0, 0)
    with pytest.raises(co.InvalidRangeError):
        Color(0, 0, 0, -1)
    with pytest.raises(co.InvalidFormatError):
        Color(1.5, 0, 0)  # type: ignore[arg-type]


def test_hex_and_qss_rendering():
    c = Color(3, 169, 244)
    assert c.hex == "#03A9F4"
    assert c.with_alpha(128).hex == "#03A9F480"
    assert c.to_qss() == "rgba(3, 169, 244, 255)"
    assert str(c) == "#03A9F4"


def test_coerce_accepts_hex_and_packed():
    assert Color.coerce("#FFFFFF") == palette.WHITE
    assert Color.coerce(0x000000FF) == palette.BLACK
    c = Color(1, 2, 3)
    assert Color.coerce(c) is c
    with pytest.raises(co.InvalidFormatError):
        Color.coerce(1.0)  # type: ignore[arg-type]


def test_darker_white_by_five_percent():
    assert co.darker(palette.WHITE, 5) == Color(242, 242, 242)


def test_lighter_and_darker_clamp():
    assert co.lighter(palette.WHITE, 50) == palette.WHITE
    assert co.darker(palette.BLACK, 50) == palette.BLACK
    assert co.lighter(palette.BLACK, 100) == palette.WHITE
    assert co.darker(palette.WHITE, 100) == palette.BLACK


def test_lightness_transforms_preserve_alpha():
    c = Color(200, 40, 40, 77)
    assert co.darker(c, 10).a == 77
    assert co.lighter(c, 10).a == 77


def test_darker_moves_toward_black():
    base = palette.color("light_blue", "P500")
    d = co.darker(base, 20)
    assert sum(d.rgba[:3]) < sum(base.rgba[:3])
    l = co.lighter(base, 20)
    assert sum(l.rgba[:3]) > sum(base.rgba[:3])


@pytest.mark.parametrize("percent", [0, 1, 25, 50, 99.5, 100])
def test_lighter_darker_stay_in_range(percent):
    for c in (palette.color("red", "P500"), palette.color("gray", "P600"), palette.CLEAR):
        out = co.darker(co.lighter(c, percent), percent)
        assert all(0 <= ch <= 255 for ch in out.rgba)


@pytest.mark.parametrize("percent", [-0.01, 100.5, 1000])
def test_percent_out_of_range(percent):
    with pytest.raises(co.InvalidRangeError):
        co.lighter(palette.WHITE, percent)
    with pytest.raises(co.InvalidRangeError):
        co.darker(palette.WHITE, percent)


def test_zero_percent_is_identity_for_palette_colors():
    c = palette.color("teal", "P500")
    assert co.darker(c, 0) == c


def test_light_dark_classification_is_exclusive():
    for family in palette.families():
        for shade in palette.shades(family):
            c = palette.color(family, shade)
            assert co.is_light(c) != co.is_dark(c)


def test_light_dark_examples():
    assert co.is_light(palette.WHITE)
    assert co.is_dark(palette.BLACK)
    assert co.is_dark(palette.color("blue_gray", "P900"))
    assert co.is_light(palette.color("yellow", "P500"))
    # alpha is ignored
    assert co.is_dark(palette.CLEAR)
