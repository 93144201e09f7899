from __future__ import annotations
from typing import Any, ClassVar, Optional, Sequence, Tuple, Type
import numpy as np
from ..channels.channel import Channel
from ..types.channel_types import ChannelValue
from .color_base import ColorBase


class RGB(ColorBase):
    """
    Red, green and blue channels of one channel type.

    >>> RGB(0.2, 0.2, 0.3) + RGB(0.3, 0.3, 0.2)
    RGB(r=0.5, g=0.5, b=0.5, dtype=float64)
    >>> RGB(0, 128, 255, dtype=np.uint8).invert()
    RGB(r=255, g=127, b=0, dtype=uint8)
    """

    __slots__ = ('_r', '_g', '_b')

    num_channels: ClassVar[int] = 3
    channel_names: ClassVar[Tuple[str, ...]] = ('r', 'g', 'b')

    def __init__(self, r: ChannelValue, g: ChannelValue, b: ChannelValue, dtype: Optional[Any] = None) -> None:
        self._set(*self._coerce_all((r, g, b), dtype))

    def _set(self, values: Sequence[Any], channel: Type[Channel]) -> None:
        self._channel = channel
        self._r, self._g, self._b = values
        self._freeze()

    @classmethod
    def _from_channels(cls, values: Sequence[Any], channel: Type[Channel]) -> RGB:
        obj = cls.__new__(cls)
        obj._set(values, channel)
        return obj

    @classmethod
    def with_components(cls, r: ChannelValue, g: ChannelValue, b: ChannelValue, dtype: Optional[Any] = None) -> RGB:
        """Construct an RGB color piecewise from individual components. Values are not clamped."""
        return cls(r, g, b, dtype)

    @classmethod
    def from_integral_components(
        cls,
        r: ChannelValue,
        g: ChannelValue,
        b: ChannelValue,
        source: Optional[Any] = None,
        dtype: Any = np.float64,
    ) -> RGB:
        """
        Create a float RGB from three unsigned integers.

        Each component is the fraction of its value between zero and the
        integral type's maximum.
        """
        return cls.from_integral_sequence((r, g, b), source, dtype)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def r(self) -> Any:
        return self._r

    @property
    def g(self) -> Any:
        return self._g

    @property
    def b(self) -> Any:
        return self._b

    def components(self) -> Tuple[Any, Any, Any]:
        """Return ``(r, g, b)``; useful for destructuring."""
        return (self._r, self._g, self._b)

    # ------------------ SETTERS (copy on write) ------------------
    def with_r(self, r: ChannelValue) -> RGB:
        return self._replace('r', r)

    def with_g(self, g: ChannelValue) -> RGB:
        return self._replace('g', g)

    def with_b(self, b: ChannelValue) -> RGB:
        return self._replace('b', b)

    def rgba(self, a: ChannelValue):
        """Create an RGBA color from this color and the supplied alpha."""
        from .rgba import RGBA  # local import to avoid cycles
        return RGBA.from_rgb(self, a)
