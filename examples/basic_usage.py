"""Basic simplecolor usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from simplecolor import RGB, RGBA, make_arithmetic
from simplecolor.colors.arithmetic import bounce


def demonstrate_colors() -> None:
    # Channel type comes from the component types, or from dtype=.
    accent = RGB(255, 128, 64)
    print("uint8 color:", accent, "luminance:", accent.luminance())

    wide = RGB(255, 128, 64, dtype=np.uint16)
    print("uint16 color:", wide)

    # Integral components scaled into float channels.
    unit = RGB.from_integral_components(255, 128, 64)
    print("scaled to float64:", unit)

    translucent = unit.rgba(0.5)
    print("with alpha:", translucent, "inverted:", translucent.invert())
    print("greyscale:", translucent.to_greyscale())


def demonstrate_arithmetic() -> None:
    a = RGBA(0.6, 0.2, 0.9, 0.5)
    b = RGBA(0.7, 0.1, 0.3, 0.5)
    # Float arithmetic is left unclamped.
    print("a + b:", a + b, "normalised:", (a + b).normalise())

    # Integral arithmetic raises on overflow unless saturated explicitly.
    try:
        RGB(200, 10, 10) + RGB(100, 10, 10)
    except OverflowError as exc:
        print("overflow:", exc)

    saturated = make_arithmetic(RGB(200, 10, 10)) + RGB(100, 10, 10)
    print("saturated:", saturated.unwrap())

    reflected = make_arithmetic(a, overflow_function=bounce) + b
    print("bounced:", reflected.unwrap())


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_arithmetic()
