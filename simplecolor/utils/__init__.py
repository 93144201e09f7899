from .num_utils import clamp, integral_max, integral_to_float, is_nan

__all__ = ["clamp", "integral_max", "integral_to_float", "is_nan"]
