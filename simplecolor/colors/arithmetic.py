from boundednumbers.functions import clamp, bounce
import inspect
import operator
import numpy as np
from typing import Callable
from ..types.channel_types import ChannelKind
from .color_base import ColorBase


class ArithmeticProxy:
    """
    A color whose piecewise operators bound their results.

    The unbounded per-channel result is passed through
    ``overflow_function(value, 0, MAX)`` before the new color is built.
    Float channels are bounded to ``[0.0, 1.0]``.
    """

    __slots__ = ("_base", "_overflow_fn")

    def __init__(self, base: ColorBase, overflow_function: Callable = clamp):
        self._base = base
        self._overflow_fn = overflow_function

    # -----------------------
    # Transparent forwarding
    # -----------------------
    def __getattr__(self, name):
        """Forward attribute access to the wrapped color; color results come back wrapped."""
        if name.startswith("_"):
            raise AttributeError(name)
        attr = getattr(self._base, name)
        if inspect.ismethod(attr):
            def wrapped(*args, **kwargs):
                result = attr(*args, **kwargs)
                if isinstance(result, ColorBase):
                    return ArithmeticProxy(result, self._overflow_fn)
                return result
            return wrapped
        return attr

    def unwrap(self) -> ColorBase:
        """Return the underlying plain color."""
        return self._base

    # -----------------------
    # Core arithmetic engine
    # -----------------------
    def _operate(self, other, op, reflected=False):
        if isinstance(other, ArithmeticProxy):
            other = other._base
        if not isinstance(other, ColorBase):
            return NotImplemented
        other = self._base._check_compatible(other)

        channel = self._base.channel
        a_vals, b_vals = self._base.components(), other.components()
        if reflected:
            a_vals, b_vals = b_vals, a_vals

        # integral channels are bounded as exact python ints
        if channel.kind is ChannelKind.INTEGRAL:
            hi = int(channel.max_value)
            values = tuple(
                channel.coerce(int(self._overflow_fn(op(int(a), int(b)), 0, hi)))
                for a, b in zip(a_vals, b_vals)
            )
        else:
            hi = float(channel.max_value)
            with np.errstate(all="ignore"):
                values = tuple(
                    channel.coerce(float(self._overflow_fn(op(np.float64(a), np.float64(b)), 0.0, hi)))
                    for a, b in zip(a_vals, b_vals)
                )

        return ArithmeticProxy(self._base._from_channels(values, channel), self._overflow_fn)

    # -----------------------
    # Operator overloads
    # -----------------------
    def __add__(self, other):
        return self._operate(other, operator.add)

    def __sub__(self, other):
        return self._operate(other, operator.sub)

    def __mul__(self, other):
        return self._operate(other, operator.mul)

    def __truediv__(self, other):
        return self._operate(other, self._base.channel.division)

    def __radd__(self, other):
        return self._operate(other, operator.add, reflected=True)

    def __rsub__(self, other):
        # other - self
        return self._operate(other, operator.sub, reflected=True)

    def __rmul__(self, other):
        return self._operate(other, operator.mul, reflected=True)

    def __rtruediv__(self, other):
        # other / self
        return self._operate(other, self._base.channel.division, reflected=True)

    def __eq__(self, other):
        if isinstance(other, ArithmeticProxy):
            other = other._base
        return self._base == other

    def __hash__(self):
        return hash(self._base)

    def __reduce__(self):
        return (self.__class__, (self._base, self._overflow_fn))

    # -----------------------
    # Representation
    # -----------------------
    def __repr__(self):
        return f"ArithmeticProxy({self._base!r})"


def make_arithmetic(color: ColorBase, overflow_function: Callable = clamp) -> ArithmeticProxy:
    """
    Wrap a color so its piecewise operators bound their results.

    Plain color operators keep each channel type's own arithmetic (integral
    results outside ``[0, MAX]`` raise ``OverflowError``, floats are left
    unclamped). Through the proxy, ``clamp`` gives saturating arithmetic and
    ``bounce`` reflects at the range edges.

    Arithmetic persists: results, and any method result that is a color, are
    wrapped again. ``unwrap()`` returns the plain color.

    Integral results are bounded as exact python ints, so every width keeps
    full precision; float results are bounded as float64.

    Args:
        color: Color to wrap (an existing proxy is re-wrapped around its color)
        overflow_function: ``f(value, lo, hi)`` applied to each channel

    Returns:
        ArithmeticProxy around ``color``
    """
    if isinstance(color, ArithmeticProxy):
        color = color.unwrap()
    if not isinstance(color, ColorBase):
        raise TypeError(f"Expected a color, got {type(color).__name__}")
    return ArithmeticProxy(color, overflow_function)


__all__ = ["ArithmeticProxy", "make_arithmetic", "clamp", "bounce"]
