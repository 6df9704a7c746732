"""
Helpers shared by both strain evaluators: predecessor iteration with chord
correction, long note detection and the press bonus term.
"""

from typing import Iterator, Optional, Sequence

from src.difficulty.preprocessing.difficulty_note import DifficultyNote
from src.difficulty.utils.numba_util import TIMING_EPSILON, definitely_bigger, logistic

PRESS_HEAD_THRESHOLD = 31.0
PRESS_HEAD_MULTIPLIER = 0.27
PRESS_HEAD_MAX_BONUS = 1.0
PRESS_BODY_THRESHOLD = 250.0
PRESS_BODY_MULTIPLIER = 0.05
PRESS_BODY_FLOOR = 0.05


def validate_previous_notes(
    current: DifficultyNote, previous_notes: Sequence[Optional[DifficultyNote]]
) -> None:
    """
    Raises:
        ValueError: If the column count is not positive or the snapshot does
                    not have one slot per column.
    """
    total_columns = current.total_columns
    if total_columns <= 0:
        raise ValueError(f"total_columns must be positive, got {total_columns}.")
    if len(previous_notes) != total_columns:
        raise ValueError(
            f"Expected {total_columns} previous note slots, got {len(previous_notes)}."
        )


def resolve_chord(current: DifficultyNote, previous: DifficultyNote) -> DifficultyNote:
    """
    Swaps a predecessor for its successor when that successor starts together
    with the current note, so a snapshot taken before the chord was linked
    still counts the chord partner.
    """
    successor = previous.next_in_column(0)
    if successor is not None and successor.start_time == current.start_time:
        return successor
    return previous


def cross_column_predecessors(
    current: DifficultyNote, previous_notes: Sequence[Optional[DifficultyNote]]
) -> Iterator[DifficultyNote]:
    """Yields the chord-corrected predecessor of every other occupied column."""
    validate_previous_notes(current, previous_notes)
    for previous in previous_notes:
        if previous is None or previous.column == current.column:
            continue
        yield resolve_chord(current, previous)


def is_long_note(note: DifficultyNote) -> bool:
    return definitely_bigger(note.end_time, note.start_time, TIMING_EPSILON)


def is_pressed_during(start_time: float, previous: DifficultyNote) -> bool:
    """Whether start_time falls strictly inside the body of `previous`."""
    return definitely_bigger(start_time, previous.start_time, TIMING_EPSILON) and definitely_bigger(
        previous.end_time, start_time, TIMING_EPSILON
    )


def press_bonus(closest_action_time: float) -> float:
    """
    Bonus for pressing while another column is held, given the time to the
    nearer of that hold's head or tail.

    The head term adds up to PRESS_HEAD_MAX_BONUS for actions inside
    PRESS_HEAD_THRESHOLD; the body term keeps the bonus near full strength up
    to PRESS_BODY_THRESHOLD before settling at PRESS_BODY_FLOOR.
    """
    head = 1.0 + logistic(
        closest_action_time,
        PRESS_HEAD_MULTIPLIER,
        PRESS_HEAD_THRESHOLD,
        PRESS_HEAD_MAX_BONUS,
    )
    body = PRESS_BODY_FLOOR + (1.0 - PRESS_BODY_FLOOR) * logistic(
        closest_action_time, PRESS_BODY_MULTIPLIER, PRESS_BODY_THRESHOLD
    )
    return head * body


def press_contribution(current: DifficultyNote, previous: DifficultyNote, adjacent_impactness: float) -> float:
    if adjacent_impactness <= 0 or not is_pressed_during(current.start_time, previous):
        return 0.0
    closest_action_time = min(
        abs(previous.end_time - current.start_time),
        abs(current.start_time - previous.start_time),
    )
    return adjacent_impactness * press_bonus(closest_action_time)
