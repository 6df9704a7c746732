"""
Column-to-hand geometry used to weigh how much a note in one column affects a
note in another.

Columns are split into a left hand (0), a right hand (1) and, for odd key
counts, a middle column (0.5) that either hand may play.
"""

import math

from numba import njit

DEFAULT_HAND_DECAY = 1.0 / 3.0


@njit
def hand(column: int, total_columns: int) -> float:
    """Maps a column to 0 (left), 0.5 (middle) or 1 (right)."""
    if total_columns <= 0:
        raise ValueError("total_columns must be a positive integer.")
    ratio = column / total_columns
    if ratio == 0.5:
        return 0.5
    return float(round(ratio))


@njit
def same_hand_impactness(column1: int, column2: int, total_columns: int) -> float:
    """
    Returns 1 for two columns on the same hand, 0 for opposite hands and 0.5
    when exactly one of them is the middle column.
    """
    hand1 = hand(column1, total_columns)
    hand2 = hand(column2, total_columns)
    if hand1 == hand2:
        return 1.0
    return (hand1 + hand2) % 1.0


@njit
def column_distance(column1: int, column2: int) -> int:
    return abs(column1 - column2)


@njit
def is_adjacent_column(column1: int, column2: int) -> bool:
    return column_distance(column1, column2) == 1


@njit
def same_hand_adjacent_column_impactness(
    column1: int, column2: int, total_columns: int, decay: float = DEFAULT_HAND_DECAY
) -> float:
    """
    Same-hand impactness scaled down geometrically with column distance.

    Adjacent columns keep the full same-hand weight; every further column
    multiplies it by `decay`.
    """
    distance = column_distance(column1, column2)
    impactness = same_hand_impactness(column1, column2, total_columns)
    return impactness * min(math.pow(decay, float(distance - 1)), 1.0)
