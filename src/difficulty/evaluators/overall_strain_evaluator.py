"""
Evaluates the strain a note adds to the overall difficulty, including how
other columns interfere with it for the whole length of a hold.
"""

from typing import Optional, Sequence

from src.difficulty.evaluators.column_interaction import (
    cross_column_predecessors,
    is_long_note,
    press_contribution,
)
from src.difficulty.preprocessing.difficulty_note import DifficultyNote
from src.difficulty.utils.hand_util import (
    DEFAULT_HAND_DECAY,
    same_hand_adjacent_column_impactness,
    same_hand_impactness,
)
from src.difficulty.utils.numba_util import (
    TIMING_EPSILON,
    definitely_bigger,
    logistic,
    soft_cap,
)


class OverallStrainEvaluator:
    """
    Press, hold and release bonuses for a single note.

    Attributes:
        HOLD_WINDOW_EXTENSION (float): How far past the end of a hold notes in
                                       other columns still count as
                                       interfering with it.
        HOLD_INTENSITY_RANGE (float): Same-column gap below which an
                                      interfering note counts as part of a
                                      dense run.
        HOLD_SATURATION (float): Interference total that brings the hold
                                 bonus halfway to HOLD_MAX_BONUS.
        RELEASE_THRESHOLD (float): Distance from the release to another
                                   column's action below which the release
                                   counts as awkward.
    """

    BASE_STRAIN = 1.0

    PRESS_SCALE = 0.25

    HOLD_WINDOW_EXTENSION = 31.0
    HOLD_INTENSITY_RANGE = 250.0
    HOLD_INTENSITY_EXPONENT = 4
    HOLD_INTENSITY_MAX_BONUS = 4.0
    HOLD_EDGE_THRESHOLD = 31.0
    HOLD_EDGE_MULTIPLIER = -0.1
    HOLD_SATURATION = 5.0
    HOLD_MAX_BONUS = 0.75

    RELEASE_THRESHOLD = 62.0
    RELEASE_MULTIPLIER = 0.27
    RELEASE_SCALE = 0.5

    @classmethod
    def evaluate_difficulty_of(
        cls,
        current: DifficultyNote,
        previous_notes: Optional[Sequence[Optional[DifficultyNote]]] = None,
        hand_decay: float = DEFAULT_HAND_DECAY,
    ) -> float:
        """
        Computes the overall strain of `current`.

        Args:
            current: The note being evaluated.
            previous_notes: One slot per column holding the latest earlier
                            note in that column. Defaults to the snapshot
                            stored on `current`.
            hand_decay: Per-column falloff of same-hand impactness.

        Returns:
            A strain value of at least BASE_STRAIN.
        """
        if previous_notes is None:
            previous_notes = current.previous_notes

        total_columns = current.total_columns
        long_note = is_long_note(current)

        press_bonus = 0.0
        hold_total = 0.0
        release_bonus = 0.0

        for previous in cross_column_predecessors(current, previous_notes):
            hand_impactness = same_hand_impactness(current.column, previous.column, total_columns)
            adjacent_impactness = same_hand_adjacent_column_impactness(
                current.column, previous.column, total_columns, hand_decay
            )

            press_bonus += press_contribution(current, previous, adjacent_impactness)

            if long_note and hand_impactness > 0:
                hold_total += hand_impactness * cls._hold_interference(current, previous)

            if long_note and adjacent_impactness > 0:
                release_bonus += adjacent_impactness * cls._release_value(current, previous)

        press_bonus = soft_cap(press_bonus) * cls.PRESS_SCALE
        hold_bonus = cls.hold_bonus_from_total(hold_total)
        release_bonus = soft_cap(release_bonus) * cls.RELEASE_SCALE

        return cls.BASE_STRAIN + press_bonus + hold_bonus + release_bonus

    @classmethod
    def hold_bonus_from_total(cls, hold_total: float) -> float:
        """Saturates the accumulated interference so the bonus stays below HOLD_MAX_BONUS."""
        return (1 - 2 ** (-hold_total / cls.HOLD_SATURATION)) * cls.HOLD_MAX_BONUS

    @classmethod
    def _hold_interference(cls, current: DifficultyNote, previous: DifficultyNote) -> float:
        """
        Sums how hard the notes of `previous`'s column are to hit while
        `current` is held, weighting dense runs and notes far from the hold's
        head and tail.
        """
        start_time = current.start_time
        end_time = current.end_time
        window_end = end_time + cls.HOLD_WINDOW_EXTENSION
        max_steps = int(end_time - start_time)

        total = 0.0
        steps = 0
        note = previous.next_in_column(0)
        while (
            note is not None
            and steps < max_steps
            and previous.start_time <= note.start_time <= window_end
        ):
            intensity = 1.0
            note_previous = note.prev_in_column(0)
            if note_previous is not None:
                gap = note.start_time - note_previous.start_time
                closeness = max(1 - gap / cls.HOLD_INTENSITY_RANGE, 0.0)
                intensity += closeness ** cls.HOLD_INTENSITY_EXPONENT * cls.HOLD_INTENSITY_MAX_BONUS

            edge_distance = min(
                abs(note.start_time - start_time), abs(note.start_time - end_time)
            )
            total += intensity * logistic(
                edge_distance, cls.HOLD_EDGE_MULTIPLIER, cls.HOLD_EDGE_THRESHOLD
            )

            note = note.next_in_column(0)
            steps += 1

        return total

    @classmethod
    def _release_value(cls, current: DifficultyNote, previous: DifficultyNote) -> float:
        """
        Finds the first hold in `previous`'s column still down when `current`
        is released and scores how close that release is to its head or tail.
        """
        end_time = current.end_time
        max_steps = int(end_time - current.start_time)

        steps = 0
        note = previous
        while note is not None and steps < max_steps:
            if definitely_bigger(note.start_time, end_time, TIMING_EPSILON):
                break
            if definitely_bigger(note.end_time, end_time, TIMING_EPSILON):
                closest_action_time = min(
                    abs(note.end_time - end_time), abs(end_time - note.start_time)
                )
                return logistic(closest_action_time, cls.RELEASE_MULTIPLIER, cls.RELEASE_THRESHOLD)
            note = note.next_in_column(0)
            steps += 1

        return 0.0


def evaluate_overall_strain(
    current: DifficultyNote,
    previous_notes: Optional[Sequence[Optional[DifficultyNote]]] = None,
) -> float:
    return OverallStrainEvaluator.evaluate_difficulty_of(current, previous_notes)
