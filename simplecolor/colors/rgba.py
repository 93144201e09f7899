from __future__ import annotations
from typing import Any, ClassVar, Optional, Sequence, Tuple, Type
import numpy as np
from ..channels.channel import Channel, channel_for
from ..types.channel_types import ChannelValue
from .color_base import ColorBase
from .rgb import RGB


class RGBA(ColorBase):
    """
    An RGB color plus an independent alpha channel of the same type.

    The color part is held as an ``RGB`` value, so an RGBA always decomposes
    cleanly into ``(rgba.rgb, rgba.a)``. Alpha takes part in every piecewise
    operation exactly like the color channels; luminance and greyscale ignore it.
    """

    __slots__ = ('_rgb', '_a')

    num_channels: ClassVar[int] = 4
    channel_names: ClassVar[Tuple[str, ...]] = ('r', 'g', 'b', 'a')

    def __init__(
        self,
        r: ChannelValue,
        g: ChannelValue,
        b: ChannelValue,
        a: ChannelValue,
        dtype: Optional[Any] = None,
    ) -> None:
        self._set(*self._coerce_all((r, g, b, a), dtype))

    def _set(self, values: Sequence[Any], channel: Type[Channel]) -> None:
        r, g, b, a = values
        self._channel = channel
        self._rgb = RGB._from_channels((r, g, b), channel)
        self._a = a
        self._freeze()

    @classmethod
    def _from_channels(cls, values: Sequence[Any], channel: Type[Channel]) -> RGBA:
        obj = cls.__new__(cls)
        obj._set(values, channel)
        return obj

    @classmethod
    def with_components(
        cls,
        r: ChannelValue,
        g: ChannelValue,
        b: ChannelValue,
        a: ChannelValue,
        dtype: Optional[Any] = None,
    ) -> RGBA:
        """Construct an RGBA color piecewise from individual components. Values are not clamped."""
        return cls(r, g, b, a, dtype)

    @classmethod
    def new(cls, dtype: Any = np.float64) -> RGBA:
        """Black with a fully opaque alpha (``MAX`` for integral channels, ``1.0`` for floats)."""
        channel = channel_for(dtype)
        return cls._from_channels((channel.zero,) * 3 + (channel.max_value,), channel)

    @classmethod
    def from_rgb(cls, rgb: RGB, a: ChannelValue) -> RGBA:
        if not isinstance(rgb, RGB):
            raise TypeError(f"Expected RGB, got {type(rgb).__name__}")
        return cls._from_channels(rgb.components() + (rgb.channel.coerce(a),), rgb.channel)

    @classmethod
    def from_integral_components(
        cls,
        r: ChannelValue,
        g: ChannelValue,
        b: ChannelValue,
        a: ChannelValue,
        source: Optional[Any] = None,
        dtype: Any = np.float64,
    ) -> RGBA:
        """Create a float RGBA from four unsigned integers, alpha scaled like the color channels."""
        return cls.from_integral_sequence((r, g, b, a), source, dtype)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def rgb(self) -> RGB:
        """The color part, without alpha."""
        return self._rgb

    @property
    def r(self) -> Any:
        return self._rgb.r

    @property
    def g(self) -> Any:
        return self._rgb.g

    @property
    def b(self) -> Any:
        return self._rgb.b

    @property
    def a(self) -> Any:
        return self._a

    def components(self) -> Tuple[Any, Any, Any, Any]:
        """Return ``(r, g, b, a)``; useful for destructuring."""
        return self._rgb.components() + (self._a,)

    # ------------------ SETTERS (copy on write) ------------------
    def with_r(self, r: ChannelValue) -> RGBA:
        return self._replace('r', r)

    def with_g(self, g: ChannelValue) -> RGBA:
        return self._replace('g', g)

    def with_b(self, b: ChannelValue) -> RGBA:
        return self._replace('b', b)

    def with_a(self, a: ChannelValue) -> RGBA:
        return self._replace('a', a)
