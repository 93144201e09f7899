from __future__ import annotations
from typing import Any, Callable, ClassVar, Iterator, List, Optional, Sequence, Tuple, Type, cast
from numpy import ndarray
import numpy as np
from ..channels.channel import Channel, channel_for
from ..types.channel_types import (
    ChannelKind,
    ChannelValue,
    ChannelVector,
    LUMINANCE_INT_SCALE,
    LUMINANCE_INT_WEIGHTS,
    LUMINANCE_WEIGHTS,
    python_default_dtypes,
)
from ..utils.num_utils import integral_to_float


def infer_channel(values: Sequence[ChannelValue], dtype: Optional[Any] = None) -> Type[Channel]:
    """
    Pick the Channel implementation for a set of component values.

    An explicit ``dtype`` wins. Otherwise numpy scalars decide (they must all
    share one type); plain python values fall back to ``python_default_dtypes``,
    float taking precedence over int.

    Args:
        values: Component values
        dtype: Optional explicit channel dtype

    Returns:
        The Channel subclass to build the color with

    Raises:
        TypeError: If the values mix numpy types or are not real numbers
    """
    if dtype is not None:
        return channel_for(dtype)

    numpy_types = {type(v) for v in values if isinstance(v, np.generic)}
    if len(numpy_types) > 1:
        names = sorted(np.dtype(t).name for t in numpy_types)
        raise TypeError(f"Components mix channel types {names}; pass dtype= to choose one")
    if numpy_types:
        return channel_for(numpy_types.pop())

    if any(isinstance(v, float) for v in values):
        return channel_for(python_default_dtypes[float])
    if all(isinstance(v, int) and not isinstance(v, bool) for v in values):
        return channel_for(python_default_dtypes[int])
    raise TypeError(f"Cannot infer a channel type from {[type(v).__name__ for v in values]}")


class ColorBase:
    """
    Immutable color value made of independent channels of one numeric type.

    Subclasses define the channel layout (``channel_names``), how to read the
    ordered components back (``components``) and how to rebuild an instance
    from already coerced channel values (``_from_channels``). Every Color
    operation below is written once against that ordered tuple and decomposes
    into per-channel Channel operations.
    """

    __slots__ = ('_channel', '_is_frozen')

    num_channels: ClassVar[int]
    channel_names: ClassVar[Tuple[str, ...]]

    def __setattr__(self, name, value):
        """Block attribute changes after construction finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def _freeze(self) -> None:
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTION ------------------
    @classmethod
    def _from_channels(cls, values: Sequence[Any], channel: Type[Channel]):
        raise NotImplementedError

    @classmethod
    def _coerce_all(
        cls, values: Sequence[ChannelValue], dtype: Optional[Any] = None
    ) -> Tuple[ChannelVector, Type[Channel]]:
        if len(values) != cls.num_channels:
            raise ValueError(f"{cls.__name__} expects {cls.num_channels} components, got {len(values)}")
        channel = infer_channel(values, dtype)
        return tuple(channel.coerce(v) for v in values), channel

    @classmethod
    def _build(cls, values: Sequence[ChannelValue], dtype: Optional[Any] = None):
        coerced, channel = cls._coerce_all(values, dtype)
        return cls._from_channels(coerced, channel)

    @classmethod
    def new(cls, dtype: Any = np.float64):
        """Create a color with every component set to zero."""
        channel = channel_for(dtype)
        return cls._from_channels((channel.zero,) * cls.num_channels, channel)

    @classmethod
    def default(cls, dtype: Any = np.float64):
        """Identical to ``new()``."""
        return cls.new(dtype)

    @classmethod
    def from_sequence(cls, values: Sequence[ChannelValue] | ndarray, dtype: Optional[Any] = None):
        """
        Build a color from an ordered sequence of components.

        Args:
            values: List, tuple or 1-D ndarray with exactly ``num_channels`` items.
                An ndarray supplies its own dtype when ``dtype`` is omitted.
            dtype: Optional channel dtype

        Returns:
            New color instance

        Raises:
            ValueError: If the sequence has the wrong length or shape
        """
        if isinstance(values, ndarray):
            if values.ndim != 1:
                raise ValueError(f"{cls.__name__} expects a 1-D array, got shape {values.shape}")
            if dtype is None:
                dtype = values.dtype
            values = list(values)
        return cls._build(tuple(values), dtype)

    from_slice = from_sequence

    @classmethod
    def from_integral_sequence(
        cls,
        values: Sequence[ChannelValue] | ndarray,
        source: Optional[Any] = None,
        dtype: Any = np.float64,
    ):
        """
        Build a floating-point color by scaling unsigned integers into ``[0.0, 1.0]``.

        Each component becomes ``value / MAX`` of its integral width. numpy
        unsigned scalars (and arrays) carry their width; plain ints are read as
        ``source`` (``np.uint8`` when omitted).

        Args:
            values: ``num_channels`` unsigned integers
            source: Integral dtype the values are drawn from
            dtype: Target float dtype

        Returns:
            New color instance with float channels
        """
        if isinstance(values, ndarray):
            if source is None and np.issubdtype(values.dtype, np.unsignedinteger):
                source = values.dtype
            values = list(values)
        if len(values) != cls.num_channels:
            raise ValueError(f"{cls.__name__} expects {cls.num_channels} components, got {len(values)}")
        channel = channel_for(dtype)
        if channel.kind is not ChannelKind.FLOAT:
            raise TypeError(f"Integral components can only be scaled into float channels, not {channel.name()}")
        return cls._from_channels(
            tuple(integral_to_float(v, source, channel.dtype) for v in values),
            channel,
        )

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def channel(self) -> Type[Channel]:
        return self._channel

    @property
    def dtype(self) -> Type[np.generic]:
        return self._channel.dtype

    def components(self) -> ChannelVector:
        raise NotImplementedError

    def to_array(self) -> ndarray:
        """Return the components as a 1-D array of the channel dtype."""
        return np.array(self.components(), dtype=self.dtype)

    def to_list(self) -> List[Any]:
        return list(self.components())

    def _replace(self, name: str, value: ChannelValue):
        values = list(self.components())
        values[self.channel_names.index(name)] = self._channel.coerce(value)
        return self._from_channels(tuple(values), self._channel)

    # ------------------ COLOR OPERATIONS ------------------
    def _map(self, fn: Callable[[Any], Any]):
        return self._from_channels(tuple(fn(v) for v in self.components()), self._channel)

    def _check_compatible(self, other: Any, role: str = "operand") -> ColorBase:
        if type(other) is not type(self):
            raise TypeError(
                f"{role} must be {self.__class__.__name__}, got {type(other).__name__}"
            )
        other = cast(ColorBase, other)
        if other._channel is not self._channel:
            raise TypeError(
                f"{role} has {other._channel.name()} channels, expected {self._channel.name()}"
            )
        return other

    def clamp_scalar(self, min_value: ChannelValue, max_value: ChannelValue):
        """
        Clamp every component between the same two scalar bounds.

        Raises:
            ValueError: If ``min_value > max_value`` or any operand is NaN
        """
        channel = self._channel
        return self._map(lambda v: channel.clamp(v, min_value, max_value))

    def clamp_color(self, min_color: ColorBase, max_color: ColorBase):
        """
        Clamp each component between the matching components of two colors.

        Raises:
            TypeError: If a bound is not the same color class and channel type
            ValueError: If a lower bound exceeds its upper bound, or any operand is NaN
        """
        min_color = self._check_compatible(min_color, "min_color")
        max_color = self._check_compatible(max_color, "max_color")
        channel = self._channel
        return self._from_channels(
            tuple(
                channel.clamp(v, lo, hi)
                for v, lo, hi in zip(self.components(), min_color.components(), max_color.components())
            ),
            channel,
        )

    def normalise(self):
        """Normalise every component (identity for integral channels, ``[0, 1]`` clamp for floats)."""
        return self._map(self._channel.normalised)

    def invert(self):
        """Invert every component."""
        return self._map(self._channel.inverted)

    def luminance(self) -> Any:
        """
        Relative luminance of the color channels (Rec. 709 weights), alpha ignored.

        Integral channels are weighted exactly and rounded half up; float
        channels are weighted in the channel type without normalising first.

        Returns:
            Scalar of the channel type
        """
        r, g, b = self.components()[:3]
        channel = self._channel
        if channel.kind is ChannelKind.INTEGRAL:
            wr, wg, wb = LUMINANCE_INT_WEIGHTS
            total = wr * int(r) + wg * int(g) + wb * int(b)
            return channel.coerce((total + LUMINANCE_INT_SCALE // 2) // LUMINANCE_INT_SCALE)
        wr, wg, wb = (channel.dtype(w) for w in LUMINANCE_WEIGHTS)
        with np.errstate(all="ignore"):
            return channel.dtype(wr * r + wg * g + wb * b)

    def mix(self, other: ColorBase):
        """Mix two colors using the additive color model (same as ``self + other``)."""
        return self + other

    def to_greyscale(self):
        """Set every color channel to the luminance; alpha is kept."""
        y = self.luminance()
        values = self.components()
        return self._from_channels((y, y, y) + tuple(values[3:]), self._channel)

    # ------------------ PIECEWISE ARITHMETIC ------------------
    def _piecewise(self, other: Any, op: str):
        if not isinstance(other, ColorBase):
            return NotImplemented
        other = self._check_compatible(other)
        fn = getattr(self._channel, op)
        return self._from_channels(
            tuple(fn(a, b) for a, b in zip(self.components(), other.components())),
            self._channel,
        )

    def __add__(self, other):
        return self._piecewise(other, "add")

    def __sub__(self, other):
        return self._piecewise(other, "sub")

    def __mul__(self, other):
        return self._piecewise(other, "mul")

    def __truediv__(self, other):
        return self._piecewise(other, "div")

    # ------------------ VALUE SEMANTICS ------------------
    def __iter__(self) -> Iterator[Any]:
        return iter(self.components())

    def __len__(self) -> int:
        return self.num_channels

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return (
            type(other) is type(self)
            and other._channel is self._channel
            and all(a == b for a, b in zip(self.components(), other.components()))
        )

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self._channel.name(), self.components()))

    def __reduce__(self):
        return (self.__class__, self.components())

    def __repr__(self) -> str:
        fields = ", ".join(f"{n}={v.item()!r}" for n, v in zip(self.channel_names, self.components()))
        return f"{self.__class__.__name__}({fields}, dtype={self._channel.name()})"
