from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Dict, Type
import operator
import numpy as np
from ..types.channel_types import ChannelKind, ChannelValue, python_default_dtypes, resolve_dtype
from ..utils.num_utils import clamp as clamp_value


class Channel(ABC):
    """
    Numeric contract for a single color component.

    A Channel is never instantiated; each subclass binds the contract to one
    numpy scalar type and is used through its classmethods.
    """

    dtype: ClassVar[Type[np.generic]]
    kind: ClassVar[ChannelKind]
    zero: ClassVar[Any]
    one: ClassVar[Any]
    max_value: ClassVar[Any]
    division: ClassVar[Callable[[Any, Any], Any]]

    @classmethod
    @abstractmethod
    def coerce(cls, value: ChannelValue) -> Any:
        """Validate ``value`` and convert it to this channel's scalar type."""

    @classmethod
    @abstractmethod
    def inverted(cls, value: ChannelValue) -> Any:
        """Return the opposite value within the normalized range."""

    @classmethod
    @abstractmethod
    def normalised(cls, value: ChannelValue) -> Any:
        """Constrain the value to the channel's normalized range."""

    @classmethod
    @abstractmethod
    def _apply(cls, op: Callable[[Any, Any], Any], a: ChannelValue, b: ChannelValue) -> Any:
        ...

    @classmethod
    def add(cls, a: ChannelValue, b: ChannelValue) -> Any:
        return cls._apply(operator.add, a, b)

    @classmethod
    def sub(cls, a: ChannelValue, b: ChannelValue) -> Any:
        return cls._apply(operator.sub, a, b)

    @classmethod
    def mul(cls, a: ChannelValue, b: ChannelValue) -> Any:
        return cls._apply(operator.mul, a, b)

    @classmethod
    def div(cls, a: ChannelValue, b: ChannelValue) -> Any:
        return cls._apply(cls.division, a, b)

    @classmethod
    def clamp(cls, value: ChannelValue, lo: ChannelValue, hi: ChannelValue) -> Any:
        """Clamp ``value`` between ``lo`` and ``hi``, all read as this channel type."""
        return cls.coerce(clamp_value(cls.coerce(value), cls.coerce(lo), cls.coerce(hi)))

    @classmethod
    def name(cls) -> str:
        return np.dtype(cls.dtype).name


class IntegralChannel(Channel):
    """
    Fixed-range unsigned integer channel.

    The whole representable range ``[0, MAX]`` is the normalized range, so
    normalising is the identity and inverting is ``MAX - value``.
    """

    kind: ClassVar[ChannelKind] = ChannelKind.INTEGRAL
    division: ClassVar[Callable[[Any, Any], Any]] = operator.floordiv

    @classmethod
    def coerce(cls, value: ChannelValue) -> Any:
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
            raise TypeError(f"{cls.name()} channel expects an integer, got {type(value).__name__}")
        as_int = int(value)
        if not 0 <= as_int <= int(cls.max_value):
            raise ValueError(f"{as_int} is out of range for {cls.name()} [0, {int(cls.max_value)}]")
        return cls.dtype(as_int)

    @classmethod
    def inverted(cls, value: ChannelValue) -> Any:
        return cls.max_value - cls.coerce(value)

    @classmethod
    def normalised(cls, value: ChannelValue) -> Any:
        return cls.coerce(value)

    @classmethod
    def _apply(cls, op: Callable[[Any, Any], Any], a: ChannelValue, b: ChannelValue) -> Any:
        # Exact python ints, so an out-of-range result is detected instead of wrapped.
        result = op(int(cls.coerce(a)), int(cls.coerce(b)))
        if not 0 <= result <= int(cls.max_value):
            raise OverflowError(
                f"{op.__name__}({int(a)}, {int(b)}) = {result} overflows {cls.name()} "
                f"[0, {int(cls.max_value)}]"
            )
        return cls.dtype(result)


class FloatChannel(Channel):
    """
    Floating-point channel.

    The normalized range is ``[0.0, 1.0]`` but any float may be stored;
    normalising clamps into that range and inverting works on the normalised
    value. NaN cannot be normalised and raises ``ValueError``.
    """

    kind: ClassVar[ChannelKind] = ChannelKind.FLOAT
    division: ClassVar[Callable[[Any, Any], Any]] = operator.truediv

    @classmethod
    def coerce(cls, value: ChannelValue) -> Any:
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, float, np.integer, np.floating)):
            raise TypeError(f"{cls.name()} channel expects a real number, got {type(value).__name__}")
        return cls.dtype(value)

    @classmethod
    def inverted(cls, value: ChannelValue) -> Any:
        return cls.one - cls.normalised(value)

    @classmethod
    def normalised(cls, value: ChannelValue) -> Any:
        return clamp_value(cls.coerce(value), cls.zero, cls.one)

    @classmethod
    def _apply(cls, op: Callable[[Any, Any], Any], a: ChannelValue, b: ChannelValue) -> Any:
        # IEEE semantics: division by zero gives inf/nan without a warning.
        with np.errstate(all="ignore"):
            return cls.dtype(op(cls.coerce(a), cls.coerce(b)))


class UInt8Channel(IntegralChannel):
    dtype: ClassVar[Type[np.generic]] = np.uint8
    zero: ClassVar[Any] = np.uint8(0)
    one: ClassVar[Any] = np.uint8(1)
    max_value: ClassVar[Any] = np.uint8(np.iinfo(np.uint8).max)


class UInt16Channel(IntegralChannel):
    dtype: ClassVar[Type[np.generic]] = np.uint16
    zero: ClassVar[Any] = np.uint16(0)
    one: ClassVar[Any] = np.uint16(1)
    max_value: ClassVar[Any] = np.uint16(np.iinfo(np.uint16).max)


class UInt32Channel(IntegralChannel):
    dtype: ClassVar[Type[np.generic]] = np.uint32
    zero: ClassVar[Any] = np.uint32(0)
    one: ClassVar[Any] = np.uint32(1)
    max_value: ClassVar[Any] = np.uint32(np.iinfo(np.uint32).max)


class UInt64Channel(IntegralChannel):
    dtype: ClassVar[Type[np.generic]] = np.uint64
    zero: ClassVar[Any] = np.uint64(0)
    one: ClassVar[Any] = np.uint64(1)
    max_value: ClassVar[Any] = np.uint64(np.iinfo(np.uint64).max)


class Float32Channel(FloatChannel):
    dtype: ClassVar[Type[np.generic]] = np.float32
    zero: ClassVar[Any] = np.float32(0.0)
    one: ClassVar[Any] = np.float32(1.0)
    max_value: ClassVar[Any] = np.float32(1.0)


class Float64Channel(FloatChannel):
    dtype: ClassVar[Type[np.generic]] = np.float64
    zero: ClassVar[Any] = np.float64(0.0)
    one: ClassVar[Any] = np.float64(1.0)
    max_value: ClassVar[Any] = np.float64(1.0)


def build_registry(*classes: Type[Channel]) -> Dict[Type[np.generic], Type[Channel]]:
    return {cls.dtype: cls for cls in classes}


channel_registry = build_registry(
    UInt8Channel,
    UInt16Channel,
    UInt32Channel,
    UInt64Channel,
    Float32Channel,
    Float64Channel,
)


def channel_for(dtype: Any) -> Type[Channel]:
    """
    Look up the Channel implementation for a dtype.

    Args:
        dtype: A supported numpy scalar type, ``np.dtype``, dtype string, or a
            Channel class (returned unchanged)

    Returns:
        The matching Channel subclass

    Raises:
        TypeError: If the dtype is not a supported channel type
    """
    if isinstance(dtype, type) and issubclass(dtype, Channel):
        return dtype
    return channel_registry[resolve_dtype(dtype)]


def channel_of(value: ChannelValue) -> Type[Channel]:
    """Return the Channel implementation a scalar value belongs to."""
    if isinstance(value, np.generic):
        return channel_for(type(value))
    for python_type, dtype in python_default_dtypes.items():
        if type(value) is python_type:
            return channel_for(dtype)
    raise TypeError(f"Cannot infer a channel type for {type(value).__name__}")


def inverted(value: ChannelValue) -> Any:
    """Invert a single channel value according to its type."""
    return channel_of(value).inverted(value)


def normalised(value: ChannelValue) -> Any:
    """Normalise a single channel value according to its type."""
    return channel_of(value).normalised(value)
