"""
Evaluates the standalone strain of a note from the notes other columns are
pressing or holding around it.
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
)
from src.difficulty.utils.numba_util import (
    TIMING_EPSILON,
    definitely_bigger,
    logistic,
    soft_cap,
)


class IndividualStrainEvaluator:
    """
    Press and shield bonuses for a single note.

    The press bonus rewards hitting a note while an adjacent same-hand column
    is held down. The shield bonus rewards hitting a note shortly after its
    own column was last hit while a neighbouring hold was covering the gap,
    which forces the hand to alternate inside a held shape.
    """

    BASE_STRAIN = 2.0

    PRESS_SCALE = 0.25

    SHIELD_RELEASE_WINDOW = 63.0
    SHIELD_INTERVAL_FLOOR = 1.0
    SHIELD_MAX_INTERVAL = 500.0
    SHIELD_TAIL_THRESHOLD = 31.0
    SHIELD_TAIL_MULTIPLIER = 0.15
    SHIELD_CAP = 1.5

    LENGTH_THRESHOLD = 125.0
    LENGTH_MULTIPLIER = -0.05
    LENGTH_MAX_BONUS = 1.5

    @classmethod
    def evaluate_difficulty_of(
        cls,
        current: DifficultyNote,
        previous_notes: Optional[Sequence[Optional[DifficultyNote]]] = None,
        hand_decay: float = DEFAULT_HAND_DECAY,
    ) -> float:
        """
        Computes the individual strain of `current`.

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
        press_bonus = 0.0
        shield_bonus = 0.0

        for previous in cross_column_predecessors(current, previous_notes):
            adjacent_impactness = same_hand_adjacent_column_impactness(
                current.column, previous.column, total_columns, hand_decay
            )
            if adjacent_impactness <= 0:
                continue

            press_bonus += press_contribution(current, previous, adjacent_impactness)
            shield_bonus += adjacent_impactness * cls._shield_value(current, previous)

        press_bonus = soft_cap(press_bonus) * cls.PRESS_SCALE

        length_bonus = 0.0
        if is_long_note(current):
            length_bonus = logistic(
                abs(current.end_time - current.start_time),
                cls.LENGTH_MULTIPLIER,
                cls.LENGTH_THRESHOLD,
                cls.LENGTH_MAX_BONUS,
            )
        shield_bonus = soft_cap(shield_bonus) * (cls.SHIELD_CAP + length_bonus)

        return cls.BASE_STRAIN * (1 + press_bonus + shield_bonus)

    @classmethod
    def _shield_value(cls, current: DifficultyNote, previous: DifficultyNote) -> float:
        start_time = current.start_time
        if not (
            definitely_bigger(previous.end_time + cls.SHIELD_RELEASE_WINDOW, start_time, TIMING_EPSILON)
            and definitely_bigger(start_time, previous.start_time, TIMING_EPSILON)
        ):
            return 0.0

        same_column_previous = current.prev_in_column(0)
        if same_column_previous is None:
            return 0.0

        shield_interval = max(
            abs(same_column_previous.start_time - start_time), cls.SHIELD_INTERVAL_FLOOR
        )
        if shield_interval > cls.SHIELD_MAX_INTERVAL:
            return 0.0

        if definitely_bigger(same_column_previous.start_time, previous.start_time, TIMING_EPSILON):
            head = 1.0
        else:
            # share of the same-column gap spent with the neighbouring hold down
            head = min(max((start_time - previous.start_time) / shield_interval, 0.0), 1.0)

        tail = logistic(
            start_time - previous.end_time,
            cls.SHIELD_TAIL_MULTIPLIER,
            cls.SHIELD_TAIL_THRESHOLD,
        )
        falloff = (1 - shield_interval / cls.SHIELD_MAX_INTERVAL) ** 2

        return head * tail * falloff


def evaluate_individual_strain(
    current: DifficultyNote,
    previous_notes: Optional[Sequence[Optional[DifficultyNote]]] = None,
) -> float:
    return IndividualStrainEvaluator.evaluate_difficulty_of(current, previous_notes)
