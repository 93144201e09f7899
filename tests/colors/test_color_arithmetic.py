import copy
import operator
import pickle
import warnings

import numpy as np
import pytest

from simplecolor.colors import RGB, RGBA, ArithmeticProxy, make_arithmetic
from simplecolor.colors.arithmetic import bounce, clamp


def test_rgb_addition_scenario():
    result = RGB.with_components(0.2, 0.2, 0.3) + RGB.with_components(0.3, 0.3, 0.2)
    assert isinstance(result, RGB)
    assert result == RGB(0.5, 0.5, 0.5)


def test_rgba_addition_scenario():
    result = RGBA(0.2, 0.2, 0.3, 0.3) + RGBA(0.3, 0.3, 0.2, 0.2)
    assert result == RGBA(0.5, 0.5, 0.5, 0.5)


@pytest.mark.parametrize("op", [operator.add, operator.sub, operator.mul, operator.truediv])
@pytest.mark.parametrize("dtype", [np.float32, np.float64])
def test_float_arithmetic_is_piecewise(op, dtype, rng):
    for _ in range(100):
        a = RGBA.from_sequence(rng.uniform(-10, 10, size=4).astype(dtype))
        b = RGBA.from_sequence(rng.uniform(0.5, 10, size=4).astype(dtype))
        result = op(a, b)
        assert result.dtype is dtype
        for got, x, y in zip(result, a, b):
            assert got == op(x, y)


def test_float_arithmetic_is_not_clamped():
    assert (RGB(0.8, 0.9, 1.0) + RGB(0.5, 0.4, 0.3)).components() == (
        np.float64(0.8) + np.float64(0.5),
        np.float64(0.9) + np.float64(0.4),
        np.float64(1.0) + np.float64(0.3),
    )
    assert (RGB(0.1, 0.1, 0.1) - RGB(0.2, 0.2, 0.2)).r < 0.0


def test_float_division_by_zero_follows_ieee():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        result = RGB(1.0, 0.0, -1.0) / RGB(0.0, 0.0, 0.0)
    assert result.r == np.inf
    assert np.isnan(result.g)
    assert result.b == -np.inf


def test_u32_addition_is_piecewise(rng):
    half = np.iinfo(np.uint32).max // 2
    for _ in range(100):
        a = RGB.from_sequence(rng.integers(0, half, size=3, dtype=np.uint32, endpoint=True))
        b = RGB.from_sequence(rng.integers(0, half, size=3, dtype=np.uint32, endpoint=True))
        result = a + b
        assert result.dtype is np.uint32
        assert [int(v) for v in result] == [int(x) + int(y) for x, y in zip(a, b)]


def test_u32_subtraction_is_piecewise(rng):
    for _ in range(100):
        pairs = np.sort(rng.integers(0, 2**32 - 1, size=(3, 2), dtype=np.uint32, endpoint=True), axis=1)
        a = RGB.from_sequence(pairs[:, 1])
        b = RGB.from_sequence(pairs[:, 0])
        assert [int(v) for v in a - b] == [int(x) - int(y) for x, y in zip(a, b)]


def test_u32_multiplication_is_piecewise(rng):
    for _ in range(100):
        a = RGB.from_sequence(rng.integers(0, 65535, size=3, dtype=np.uint32, endpoint=True))
        b = RGB.from_sequence(rng.integers(0, 65535, size=3, dtype=np.uint32, endpoint=True))
        assert [int(v) for v in a * b] == [int(x) * int(y) for x, y in zip(a, b)]


def test_u32_division_is_piecewise(rng):
    for _ in range(100):
        a = RGB.from_sequence(rng.integers(0, 2**32 - 1, size=3, dtype=np.uint32, endpoint=True))
        b = RGB.from_sequence(rng.integers(1, 2**32 - 1, size=3, dtype=np.uint32, endpoint=True))
        assert [int(v) for v in a / b] == [int(x) // int(y) for x, y in zip(a, b)]


def test_integral_division_floors():
    assert RGB(7, 9, 255) / RGB(2, 4, 16) == RGB(3, 2, 15)


def test_integral_overflow_fails_fast():
    with pytest.raises(OverflowError):
        RGB(200, 0, 0) + RGB(100, 0, 0)
    with pytest.raises(OverflowError):
        RGB(0, 0, 0) - RGB(0, 1, 0)
    with pytest.raises(OverflowError):
        RGBA(0, 0, 0, 16) * RGBA(0, 0, 0, 16)


def test_integral_division_by_zero_fails_fast():
    with pytest.raises(ZeroDivisionError):
        RGB(1, 1, 1) / RGB(1, 0, 1)


def test_rgba_alpha_is_combined_independently():
    a = RGBA(0.5, 0.5, 0.5, 0.8)
    b = RGBA(0.25, 0.25, 0.25, 0.5)
    assert (a + b).a == np.float64(0.8) + np.float64(0.5)
    assert (a - b) == RGBA(0.25, 0.25, 0.25, np.float64(0.8) - np.float64(0.5))
    assert (a * b).a == np.float64(0.8) * np.float64(0.5)
    assert (a / b).a == np.float64(0.8) / np.float64(0.5)
    assert (a - b).rgb == a.rgb - b.rgb


def test_operands_must_match():
    with pytest.raises(TypeError):
        RGB(1, 2, 3) + RGB(1, 2, 3, dtype=np.uint16)
    with pytest.raises(TypeError):
        RGB(1, 2, 3) + RGBA(1, 2, 3, 4)
    with pytest.raises(TypeError):
        RGB(0.1, 0.2, 0.3) + 0.5
    with pytest.raises(TypeError):
        RGB(0.1, 0.2, 0.3) * (1.0, 1.0, 1.0)


def test_operands_are_not_mutated():
    a = RGB(0.2, 0.2, 0.3)
    b = RGB(0.3, 0.3, 0.2)
    a + b
    a / b
    assert a == RGB(0.2, 0.2, 0.3)
    assert b == RGB(0.3, 0.3, 0.2)


# ---------------------------------------------------------------------------
# Saturating arithmetic proxy
# ---------------------------------------------------------------------------

def test_make_arithmetic_clamps_integral_results():
    result = make_arithmetic(RGB(200, 100, 0)) + RGB(100, 100, 0)
    assert isinstance(result.unwrap(), RGB)
    assert result.unwrap() == RGB(255, 200, 0)

    result = make_arithmetic(RGB(10, 100, 0)) - RGB(20, 50, 0)
    assert result.unwrap() == RGB(0, 50, 0)


def test_make_arithmetic_clamps_float_results():
    result = make_arithmetic(RGB(0.8, 0.9, 1.0)) + RGB(0.5, 0.4, 0.3)
    assert np.allclose(result.unwrap().to_array(), (1.0, 1.0, 1.0))

    result = make_arithmetic(RGB(0.6, 0.7, 0.8)) - RGB(0.5, 0.6, 0.9)
    assert np.allclose(result.unwrap().to_array(), (0.1, 0.1, 0.0))

    result = make_arithmetic(RGB(0.6, 0.8, 1.0)) / RGB(0.3, 0.4, 0.5)
    assert np.allclose(result.unwrap().to_array(), (1.0, 1.0, 1.0))


def test_make_arithmetic_keeps_channel_type():
    result = make_arithmetic(RGBA(0.5, 0.5, 0.5, 0.9, dtype=np.float32)) + RGBA(0.6, 0.1, 0.1, 0.9, dtype=np.float32)
    color = result.unwrap()
    assert color.dtype is np.float32
    assert color.a == 1.0
    assert color.r == 1.0


def test_make_arithmetic_bounce():
    a = RGB(0.9, 0.8, 0.7)
    b = RGB(0.5, 0.4, 0.3)
    result = make_arithmetic(a, overflow_function=bounce) + b
    expected = [bounce(float(x) + float(y), 0.0, 1.0) for x, y in zip(a, b)]
    assert np.allclose(result.unwrap().to_array(), expected)
    assert np.allclose(result.unwrap().to_array(), (0.6, 0.8, 1.0))


def test_make_arithmetic_bounce_integral():
    result = make_arithmetic(RGB(200, 10, 0), overflow_function=bounce) + RGB(100, 0, 0)
    assert result.unwrap() == RGB(210, 10, 0)
    result = make_arithmetic(RGB(10, 0, 0), overflow_function=bounce) - RGB(30, 0, 0)
    assert result.unwrap() == RGB(20, 0, 0)


@pytest.mark.parametrize("dtype", [np.uint32, np.uint64])
def test_make_arithmetic_is_exact_for_wide_channels(dtype):
    maximum = int(np.iinfo(dtype).max)
    near = RGB(maximum - 1, maximum, 1, dtype=dtype)
    zero = RGB(0, 0, 0, dtype=dtype)
    assert (make_arithmetic(near) + zero).unwrap() == near

    one = RGB(1, 1, 1, dtype=dtype)
    saturated = (make_arithmetic(near) + one).unwrap()
    assert saturated == RGB(maximum, maximum, 2, dtype=dtype)
    assert int(saturated.r) == maximum

    assert (make_arithmetic(RGB(0, 0, 0, dtype=dtype)) - one).unwrap() == zero


def test_make_arithmetic_copies_and_pickles():
    proxy = make_arithmetic(RGB(1, 2, 3), overflow_function=bounce)
    for clone in (copy.copy(proxy), copy.deepcopy(proxy), pickle.loads(pickle.dumps(proxy))):
        assert isinstance(clone, ArithmeticProxy)
        assert clone.unwrap() == RGB(1, 2, 3)
        assert (clone + RGB(255, 0, 0)).unwrap() == RGB(254, 2, 3)
    with pytest.raises(AttributeError):
        proxy._missing


def test_make_arithmetic_with_explicit_clamp_matches_default():
    a, b = RGB(250, 5, 128), RGB(10, 10, 200)
    assert (make_arithmetic(a, overflow_function=clamp) + b) == (make_arithmetic(a) + b)


def test_make_arithmetic_reflected_operands():
    proxy = make_arithmetic(RGB(100, 100, 100))
    assert (RGB(50, 200, 250) + proxy).unwrap() == RGB(150, 255, 255)
    assert (RGB(50, 200, 250) - proxy).unwrap() == RGB(0, 100, 150)


def test_make_arithmetic_persists_through_operations():
    proxy = make_arithmetic(RGB(100, 100, 100))
    result = (proxy + RGB(100, 100, 100)) + RGB(100, 100, 100)
    assert result.unwrap() == RGB(255, 255, 255)

    inverted = proxy.invert()
    assert inverted.unwrap() == RGB(155, 155, 155)
    assert (inverted + RGB(200, 0, 0)).unwrap() == RGB(255, 155, 155)


def test_make_arithmetic_forwards_attributes():
    proxy = make_arithmetic(RGB(255, 0, 0))
    assert proxy.r == 255
    assert proxy.dtype is np.uint8
    assert proxy.luminance() == 54
    assert proxy == RGB(255, 0, 0)


def test_make_arithmetic_still_checks_operands():
    with pytest.raises(TypeError):
        make_arithmetic(RGB(1, 2, 3)) + RGB(1, 2, 3, dtype=np.uint16)
    with pytest.raises(ZeroDivisionError):
        make_arithmetic(RGB(1, 2, 3)) / RGB(1, 0, 3)


def test_make_arithmetic_proxies_combine():
    a = make_arithmetic(RGB(0.7, 0.2, 0.0))
    b = make_arithmetic(RGB(0.7, 0.2, 0.0), overflow_function=bounce)
    # the left operand's overflow function wins
    assert (a + b).unwrap() == RGB(1.0, 0.4, 0.0)


def test_make_arithmetic_requires_a_color():
    with pytest.raises(TypeError):
        make_arithmetic((0.1, 0.2, 0.3))
    proxy = make_arithmetic(RGB(1, 2, 3))
    assert make_arithmetic(proxy).unwrap() is proxy.unwrap()
