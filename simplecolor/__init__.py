"""
simplecolor - generic RGB and RGBA colors
=========================================

Color values parameterized over a numeric channel type, with one set of
arithmetic, clamping, normalisation and inversion semantics that holds for
fixed-range unsigned integers and for floating point channels alike.

>>> from simplecolor import RGB, RGBA, inverted
>>> RGB(0.1, 0.9, 1.5).clamp_scalar(0.0, 1.0)
RGB(r=0.1, g=0.9, b=1.0, dtype=float64)
>>> RGBA(0.5, 0.2, 0.2, 0.7).components()
(np.float64(0.5), np.float64(0.2), np.float64(0.2), np.float64(0.7))
"""

from .colors.color_base import ColorBase
from .colors.rgb import RGB
from .colors.rgba import RGBA
from .colors.arithmetic import make_arithmetic

from .channels import (
    Channel,
    IntegralChannel,
    FloatChannel,
    UInt8Channel,
    UInt16Channel,
    UInt32Channel,
    UInt64Channel,
    Float32Channel,
    Float64Channel,
    channel_for,
    channel_of,
    inverted,
    normalised,
)

from .types import ChannelKind, SUPPORTED_DTYPES
from .utils import clamp, integral_to_float

__version__ = "0.1.0"

__all__ = [
    # Color classes
    "ColorBase",
    "RGB",
    "RGBA",
    "make_arithmetic",

    # Channels
    "Channel",
    "IntegralChannel",
    "FloatChannel",
    "UInt8Channel",
    "UInt16Channel",
    "UInt32Channel",
    "UInt64Channel",
    "Float32Channel",
    "Float64Channel",
    "channel_for",
    "channel_of",
    "inverted",
    "normalised",

    # Types and utilities
    "ChannelKind",
    "SUPPORTED_DTYPES",
    "clamp",
    "integral_to_float",
]
