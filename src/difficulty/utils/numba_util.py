import math

from numba import njit

TIMING_EPSILON = 1.0


@njit
def definitely_bigger(value1: float, value2: float, acceptable_difference: float = 1.0) -> bool:
    """
    Checks whether value1 exceeds value2 by more than acceptable_difference.

    Millisecond timestamps are compared through this rather than `>` so that
    rounding jitter in the source chart does not flip an ordering.
    """
    return value1 - acceptable_difference > value2


@njit
def logistic(x: float, multiplier: float, midpoint_offset: float, max_value: float = 1.0) -> float:
    """
    Smooth step from max_value down to 0 centered on midpoint_offset.

    A positive multiplier gives ~max_value below the midpoint and ~0 above it,
    a negative multiplier mirrors the curve. The magnitude sets steepness.
    """
    exponent = multiplier * (x - midpoint_offset)
    if exponent >= 0.0:
        decay = math.exp(-exponent)
        return max_value * decay / (1.0 + decay)
    return max_value / (1.0 + math.exp(exponent))


@njit
def soft_cap(value: float) -> float:
    """Square-roots a bonus once it exceeds 1 so stacked contributions flatten out."""
    if value > 1.0:
        return math.sqrt(value)
    return value
