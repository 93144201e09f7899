import numpy as np
import pytest

from simplecolor.colors import RGB, RGBA


def test_color_creation_no_clamping():
    color = RGBA.with_components(0.5, 0.2, 0.2, 0.7)
    assert color.components() == (0.5, 0.2, 0.2, 0.7)
    assert (color.r, color.g, color.b, color.a) == (0.5, 0.2, 0.2, 0.7)


def test_rgba_embeds_rgb():
    color = RGBA(10, 20, 30, 40)
    assert isinstance(color.rgb, RGB)
    assert color.rgb == RGB(10, 20, 30)
    assert color.a == 40
    assert color.rgb.dtype is color.dtype


def test_from_rgb():
    rgb = RGB(0.1, 0.2, 0.3, dtype=np.float32)
    rgba = RGBA.from_rgb(rgb, 0.5)
    assert rgba.dtype is np.float32
    assert rgba.rgb == rgb
    assert type(rgba.a) is np.float32
    with pytest.raises(TypeError):
        RGBA.from_rgb((0.1, 0.2, 0.3), 0.5)


def test_new_is_opaque_black():
    assert RGBA.new() == RGBA(0.0, 0.0, 0.0, 1.0)
    assert RGBA.new(np.uint8) == RGBA(0, 0, 0, 255)
    assert RGBA.new(np.uint16).a == 65535


def test_from_sequence():
    assert RGBA.from_sequence([1, 2, 3, 4]) == RGBA(1, 2, 3, 4)
    color = RGBA.from_sequence(np.array([0.1, 0.2, 0.3, 0.4], dtype=np.float32))
    assert color.dtype is np.float32
    with pytest.raises(ValueError, match="expects 4 components"):
        RGBA.from_sequence([1, 2, 3])


def test_from_integral_components_scales_alpha():
    color = RGBA.from_integral_components(255, 0, 0, 51)
    assert color.components() == (1.0, 0.0, 0.0, np.float64(51) / np.float64(255))
    color = RGBA.from_integral_sequence(np.array([0, 0, 65535, 65535], dtype=np.uint16), dtype=np.float32)
    assert color.components() == (0.0, 0.0, 1.0, 1.0)
    assert color.dtype is np.float32


def test_setters():
    color = RGBA(0.1, 0.2, 0.3, 0.4)
    assert color.with_r(1.0) == RGBA(1.0, 0.2, 0.3, 0.4)
    assert color.with_g(1.0) == RGBA(0.1, 1.0, 0.3, 0.4)
    assert color.with_b(1.0) == RGBA(0.1, 0.2, 1.0, 0.4)
    assert color.with_a(1.0) == RGBA(0.1, 0.2, 0.3, 1.0)
    assert color.with_a(1.0).rgb == color.rgb


def test_decomposition():
    color = RGBA(1, 2, 3, 4, dtype=np.uint32)
    r, g, b, a = color
    assert (r, g, b, a) == (1, 2, 3, 4)
    assert len(color) == 4
    assert color.to_array().dtype == np.uint32
    assert color.to_list() == [1, 2, 3, 4]


def test_immutable():
    color = RGBA(1, 2, 3, 4)
    with pytest.raises(AttributeError):
        color.a = 5
    with pytest.raises(AttributeError):
        color._rgb = RGB(0, 0, 0)


def test_rgba_is_not_rgb():
    assert RGBA(1, 2, 3, 4) != RGB(1, 2, 3)
    assert hash(RGBA(1, 2, 3, 4)) == hash(RGBA(1, 2, 3, 4))


def test_repr():
    assert repr(RGBA(1, 2, 3, 4)) == "RGBA(r=1, g=2, b=3, a=4, dtype=uint8)"
