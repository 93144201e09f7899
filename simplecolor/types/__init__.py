from .channel_types import (
    ChannelKind,
    ChannelScalar,
    ChannelValue,
    ChannelVector,
    INTEGRAL_DTYPES,
    FLOAT_DTYPES,
    SUPPORTED_DTYPES,
    LUMINANCE_WEIGHTS,
    LUMINANCE_INT_WEIGHTS,
    LUMINANCE_INT_SCALE,
    python_default_dtypes,
    dtype_kinds,
    resolve_dtype,
)

__all__ = [
    "ChannelKind",
    "ChannelScalar",
    "ChannelValue",
    "ChannelVector",
    "INTEGRAL_DTYPES",
    "FLOAT_DTYPES",
    "SUPPORTED_DTYPES",
    "LUMINANCE_WEIGHTS",
    "LUMINANCE_INT_WEIGHTS",
    "LUMINANCE_INT_SCALE",
    "python_default_dtypes",
    "dtype_kinds",
    "resolve_dtype",
]
