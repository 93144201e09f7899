from __future__ import annotations
from typing import Any, Optional, Type
import warnings
import numpy as np
from ..types.channel_types import ChannelKind, ChannelValue, dtype_kinds, resolve_dtype


def is_nan(value: Any) -> bool:
    """Check if a scalar is a floating-point NaN."""
    return isinstance(value, (float, np.floating)) and bool(np.isnan(value))


def clamp(value: ChannelValue, lo: ChannelValue, hi: ChannelValue) -> ChannelValue:
    """
    Clamp a value between two bounds.

    The smaller of ``value`` and ``hi`` is taken first, then the larger of that
    and ``lo``, so infinities resolve to the nearer bound.

    Args:
        value: Value to clamp
        lo: Lower bound
        hi: Upper bound

    Returns:
        The clamped value, of the same type as whichever operand was selected

    Raises:
        ValueError: If any operand is NaN, or if ``lo > hi``
    """
    if is_nan(value) or is_nan(lo) or is_nan(hi):
        raise ValueError(f"Cannot clamp NaN (value={value!r}, lo={lo!r}, hi={hi!r})")
    if lo > hi:
        raise ValueError(f"Clamp bounds are inverted: lo={lo!r} > hi={hi!r}")
    return max(min(value, hi), lo)


def integral_max(source: Any) -> int:
    """Return the largest value representable by an unsigned integral dtype."""
    scalar_type = resolve_dtype(source)
    if dtype_kinds[scalar_type] is not ChannelKind.INTEGRAL:
        raise TypeError(f"{np.dtype(scalar_type).name} is not an unsigned integral dtype")
    return int(np.iinfo(scalar_type).max)


def integral_to_float(
    value: ChannelValue,
    source: Optional[Any] = None,
    dtype: Any = np.float64,
) -> np.floating:
    """
    Scale an unsigned integer from ``[0, MAX]`` of its width into ``[0.0, 1.0]``.

    Args:
        value: Unsigned integer. numpy unsigned scalars carry their own width;
            plain ints are read as ``source`` (``np.uint8`` when omitted).
        source: Integral dtype the value is drawn from
        dtype: Target float dtype (``np.float32`` or ``np.float64``)

    Returns:
        ``value / MAX`` as a scalar of the target float type

    Raises:
        TypeError: If ``value`` is not an integer, ``source`` is not unsigned
            integral, or ``dtype`` is not floating point
        ValueError: If ``value`` lies outside ``[0, MAX]``
    """
    if source is None:
        source = type(value) if isinstance(value, np.unsignedinteger) else np.uint8
    if not isinstance(value, (int, np.integer)) or isinstance(value, (bool, np.bool_)):
        raise TypeError(f"Expected an unsigned integer, got {type(value).__name__}")

    target = resolve_dtype(dtype)
    if dtype_kinds[target] is not ChannelKind.FLOAT:
        raise TypeError(f"Target dtype must be floating point, got {np.dtype(target).name}")

    maximum = integral_max(source)
    as_int = int(value)
    if not 0 <= as_int <= maximum:
        raise ValueError(
            f"{as_int} is out of range for {np.dtype(resolve_dtype(source)).name} [0, {maximum}]"
        )

    if np.finfo(target).nmant + 1 < maximum.bit_length():
        warnings.warn(
            f"Scaling {np.dtype(resolve_dtype(source)).name} into {np.dtype(target).name} "
            f"loses precision",
            UserWarning,
            stacklevel=2,
        )
    return target(as_int) / target(maximum)
