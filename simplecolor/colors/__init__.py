"""
simplecolor Color Classes
=========================

Immutable RGB and RGBA colors, generic over the numpy channel type.

Features
--------
- Immutable color instances (frozen after initialization), hashable field-wise
- Channels of any supported type: uint8/16/32/64 or float32/64
- Piecewise arithmetic (+, -, *, /) with each channel type's own semantics
- Clamping, normalising, inverting, luminance and greyscale
- Saturating arithmetic on demand via ``make_arithmetic``

Usage
-----
>>> import numpy as np
>>> from simplecolor.colors import RGB, RGBA
>>>
>>> color = RGB(0.2, 0.4, 0.6)            # python floats -> float64 channels
>>> color.components()
(np.float64(0.2), np.float64(0.4), np.float64(0.6))
>>> color.invert()
RGB(r=0.8, g=0.6, b=0.4, dtype=float64)
>>>
>>> byte = RGB(255, 128, 0)              # python ints -> uint8 channels
>>> byte.dtype
<class 'numpy.uint8'>
>>> RGB.from_integral_components(255, 0, 51)
RGB(r=1.0, g=0.0, b=0.2, dtype=float64)
>>>
>>> rgba = byte.rgba(255)
>>> rgba.rgb == byte
True

Notes
-----
- Construction does not clamp floats; ``normalise`` or ``clamp_scalar`` does.
- Integral components outside ``[0, MAX]`` are rejected with ``ValueError``.
- Integral arithmetic that leaves ``[0, MAX]`` raises ``OverflowError``;
  wrap the color with ``make_arithmetic`` to saturate instead.
"""

from .color_base import ColorBase, infer_channel
from .rgb import RGB
from .rgba import RGBA
from .arithmetic import ArithmeticProxy, make_arithmetic


__all__ = ['ColorBase', 'RGB', 'RGBA', 'ArithmeticProxy', 'infer_channel', 'make_arithmetic']
