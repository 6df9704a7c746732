from .numba_util import TIMING_EPSILON, definitely_bigger, logistic, soft_cap
from .hand_util import (
    DEFAULT_HAND_DECAY,
    column_distance,
    hand,
    is_adjacent_column,
    same_hand_adjacent_column_impactness,
    same_hand_impactness,
)

__all__ = [
    "TIMING_EPSILON",
    "definitely_bigger",
    "logistic",
    "soft_cap",
    "DEFAULT_HAND_DECAY",
    "column_distance",
    "hand",
    "is_adjacent_column",
    "same_hand_adjacent_column_impactness",
    "same_hand_impactness",
]
