"""
Channel implementations.

One Channel class per supported numpy scalar type:

    - UInt8Channel, UInt16Channel, UInt32Channel, UInt64Channel:
      fixed-range unsigned integers, normalized range ``[0, MAX]``
    - Float32Channel, Float64Channel:
      floating point, normalized range ``[0.0, 1.0]``

>>> import numpy as np
>>> from simplecolor.channels import inverted, normalised
>>> inverted(np.uint8(0))
np.uint8(255)
>>> normalised(np.float64(1.5))
np.float64(1.0)
"""

from .channel import (
    Channel,
    IntegralChannel,
    FloatChannel,
    UInt8Channel,
    UInt16Channel,
    UInt32Channel,
    UInt64Channel,
    Float32Channel,
    Float64Channel,
    channel_registry,
    channel_for,
    channel_of,
    inverted,
    normalised,
)

__all__ = [
    "Channel",
    "IntegralChannel",
    "FloatChannel",
    "UInt8Channel",
    "UInt16Channel",
    "UInt32Channel",
    "UInt64Channel",
    "Float32Channel",
    "Float64Channel",
    "channel_registry",
    "channel_for",
    "channel_of",
    "inverted",
    "normalised",
]
