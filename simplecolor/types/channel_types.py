from __future__ import annotations
from enum import Enum
from typing import Any, Tuple, Type, Union
import numpy as np


class ChannelKind(str, Enum):
    INTEGRAL = "integral"
    FLOAT = "float"


ChannelScalar = Union[np.unsignedinteger, np.floating]
ChannelValue = Union[int, float, ChannelScalar]
ChannelVector = Tuple[ChannelScalar, ...]

INTEGRAL_DTYPES: Tuple[Type[np.generic], ...] = (np.uint8, np.uint16, np.uint32, np.uint64)
FLOAT_DTYPES: Tuple[Type[np.generic], ...] = (np.float32, np.float64)
SUPPORTED_DTYPES = INTEGRAL_DTYPES + FLOAT_DTYPES

dtype_kinds = {
    **{t: ChannelKind.INTEGRAL for t in INTEGRAL_DTYPES},
    **{t: ChannelKind.FLOAT for t in FLOAT_DTYPES},
}

# Plain python scalars carry no width; int maps onto the usual 0..255 range.
python_default_dtypes = {
    int: np.uint8,
    float: np.float64,
}

# Rec. 709 relative luminance weights, as floats and as exact integers over 10000.
LUMINANCE_WEIGHTS: Tuple[float, float, float] = (0.2126, 0.7152, 0.0722)
LUMINANCE_INT_WEIGHTS: Tuple[int, int, int] = (2126, 7152, 722)
LUMINANCE_INT_SCALE = 10000


def resolve_dtype(dtype: Any) -> Type[np.generic]:
    """
    Resolve anything numpy understands as a dtype to a supported scalar type.

    Args:
        dtype: A numpy scalar type, ``np.dtype``, or dtype string (e.g. ``"uint8"``)

    Returns:
        The numpy scalar type (e.g. ``np.uint8``)

    Raises:
        TypeError: If the dtype is not one of the supported channel types
    """
    try:
        scalar_type = np.dtype(dtype).type
    except TypeError as e:
        raise TypeError(f"{dtype!r} is not a valid channel dtype") from e
    if scalar_type not in dtype_kinds:
        raise TypeError(
            f"Unsupported channel dtype {np.dtype(scalar_type).name}; "
            f"expected one of {[np.dtype(t).name for t in SUPPORTED_DTYPES]}"
        )
    return scalar_type
