import unittest

from src.difficulty.chart.note import Note
from src.difficulty.evaluators.overall_strain_evaluator import (
    OverallStrainEvaluator,
    evaluate_overall_strain,
)
from src.difficulty.preprocessing.note_sequence import NoteSequence


def build_sequence(raw_notes, total_columns=4):
    notes = [Note(start_time=s, end_time=e, column=c) for s, e, c in raw_notes]
    return NoteSequence.from_notes(notes, total_columns)


def find_note(sequence, start_time, column):
    for note in sequence:
        if note.start_time == start_time and note.column == column:
            return note
    raise LookupError(f"No note at {start_time}ms in column {column}")


def dense_run_under_hold(spacing):
    """A 100-600ms hold in column 0 with taps every `spacing` ms in column 1."""
    raw_notes = [(100.0, 600.0, 0)]
    time = 5.0
    while time <= 700.0:
        raw_notes.append((time, time, 1))
        time += spacing
    sequence = build_sequence(raw_notes)
    return find_note(sequence, 100.0, 0)


class TestOverallStrainBaseline(unittest.TestCase):

    def test_single_tap(self):
        sequence = build_sequence([(100.0, 100.0, 2)])
        self.assertEqual(evaluate_overall_strain(sequence[0]), 1.0)

    def test_lone_hold(self):
        sequence = build_sequence([(0.0, 0.0, 0), (100.0, 800.0, 0)])
        self.assertEqual(evaluate_overall_strain(sequence[1]), 1.0)

    def test_opposite_hand_run_has_no_effect(self):
        sequence = build_sequence(
            [(100.0, 600.0, 0)] + [(float(t), float(t), 3) for t in range(0, 700, 50)]
        )
        self.assertEqual(evaluate_overall_strain(find_note(sequence, 100.0, 0)), 1.0)

    def test_tap_under_taps_has_no_hold_bonus(self):
        sequence = build_sequence(
            [(100.0, 100.0, 0)] + [(float(t), float(t), 1) for t in range(5, 700, 50)]
        )
        self.assertEqual(evaluate_overall_strain(find_note(sequence, 100.0, 0)), 1.0)


class TestOverallPressBonus(unittest.TestCase):

    def test_tap_inside_adjacent_hold(self):
        sequence = build_sequence([(0.0, 500.0, 1), (100.0, 100.0, 0)])
        self.assertGreater(evaluate_overall_strain(sequence[1]), 1.0)


class TestOverallHoldBonus(unittest.TestCase):

    def test_saturation_curve(self):
        self.assertEqual(OverallStrainEvaluator.hold_bonus_from_total(0.0), 0.0)
        self.assertAlmostEqual(OverallStrainEvaluator.hold_bonus_from_total(5.0), 0.375)
        self.assertLess(OverallStrainEvaluator.hold_bonus_from_total(100.0), 0.75)

    def test_denser_runs_approach_but_never_reach_cap(self):
        bonuses = [
            evaluate_overall_strain(dense_run_under_hold(spacing)) - 1.0
            for spacing in (200.0, 100.0, 50.0, 25.0, 10.0)
        ]
        for sparser, denser in zip(bonuses, bonuses[1:]):
            self.assertGreater(denser, sparser)
        self.assertGreater(bonuses[0], 0.0)
        self.assertLess(bonuses[-1], 0.75)
        self.assertGreater(bonuses[-1], 0.74)

    def test_run_starting_with_the_hold_counts(self):
        # column 1 has no note before the chord at 100ms
        sequence = build_sequence(
            [(100.0, 600.0, 0)] + [(float(t), float(t), 1) for t in range(100, 701, 25)]
        )
        hold = find_note(sequence, 100.0, 0)
        self.assertIs(hold.previous_notes[1], find_note(sequence, 100.0, 1))
        self.assertGreater(evaluate_overall_strain(hold), 1.7)

    def test_walk_stops_at_hold_duration(self):
        # a 3ms hold walks at most 3 notes even though the window reaches 134ms
        capped_run = build_sequence(
            [(100.0, 103.0, 0)] + [(float(t), float(t), 1) for t in range(99, 135)]
        )
        short_run = build_sequence(
            [(100.0, 103.0, 0)] + [(float(t), float(t), 1) for t in range(99, 104)]
        )
        capped = evaluate_overall_strain(find_note(capped_run, 100.0, 0))
        self.assertGreater(capped, 1.0)
        self.assertEqual(capped, evaluate_overall_strain(find_note(short_run, 100.0, 0)))

    def test_degenerate_hold_gets_no_hold_bonus(self):
        sequence = build_sequence(
            [(100.0, 100.5, 0)] + [(float(t), float(t), 1) for t in range(5, 700, 25)]
        )
        self.assertEqual(evaluate_overall_strain(find_note(sequence, 100.0, 0)), 1.0)

    def test_middle_column_counts_half(self):
        same_hand = dense_run_under_hold(100.0)
        sequence = build_sequence(
            [(100.0, 600.0, 1)] + [(float(t), float(t), 2) for t in range(5, 701, 100)]
        )
        middle = find_note(sequence, 100.0, 1)
        self.assertLess(evaluate_overall_strain(middle), evaluate_overall_strain(same_hand))
        self.assertGreater(evaluate_overall_strain(middle), 1.0)


class TestOverallReleaseBonus(unittest.TestCase):

    def test_release_next_to_overlapping_release(self):
        awkward = build_sequence([(50.0, 410.0, 1), (100.0, 400.0, 0)])
        relaxed = build_sequence([(50.0, 700.0, 1), (100.0, 400.0, 0)])
        difference = evaluate_overall_strain(awkward[1]) - evaluate_overall_strain(relaxed[1])
        self.assertAlmostEqual(difference, 0.5, places=3)

    def test_release_finds_later_hold_in_column(self):
        sequence = build_sequence([(0.0, 0.0, 1), (100.0, 400.0, 0), (150.0, 420.0, 1)])
        without_overlap = build_sequence([(0.0, 0.0, 1), (100.0, 400.0, 0), (150.0, 150.0, 1)])
        self.assertGreater(
            evaluate_overall_strain(sequence[1]),
            evaluate_overall_strain(without_overlap[1]),
        )

    def test_release_walk_stops_at_hold_duration(self):
        # the overlapping hold is the fourth step from the predecessor, past a 3ms cap
        with_hold = build_sequence(
            [(100.0, 103.0, 0), (100.0, 100.0, 1), (101.0, 101.0, 1),
             (102.0, 102.0, 1), (103.5, 500.0, 1)]
        )
        with_tap = build_sequence(
            [(100.0, 103.0, 0), (100.0, 100.0, 1), (101.0, 101.0, 1),
             (102.0, 102.0, 1), (103.5, 103.5, 1)]
        )
        self.assertEqual(
            evaluate_overall_strain(find_note(with_hold, 100.0, 0)),
            evaluate_overall_strain(find_note(with_tap, 100.0, 0)),
        )

    def test_release_found_within_hold_duration(self):
        with_hold = build_sequence(
            [(100.0, 103.0, 0), (100.0, 100.0, 1), (103.5, 500.0, 1)]
        )
        with_tap = build_sequence(
            [(100.0, 103.0, 0), (100.0, 100.0, 1), (103.5, 103.5, 1)]
        )
        self.assertGreater(
            evaluate_overall_strain(find_note(with_hold, 100.0, 0)),
            evaluate_overall_strain(find_note(with_tap, 100.0, 0)),
        )

    def test_tap_has_no_release_bonus(self):
        sequence = build_sequence([(50.0, 410.0, 1), (100.0, 100.0, 0)])
        tap = evaluate_overall_strain(sequence[1])
        degenerate = evaluate_overall_strain(
            build_sequence([(50.0, 410.0, 1), (100.0, 100.5, 0)])[1]
        )
        self.assertEqual(tap, degenerate)


class TestOverallStrainContract(unittest.TestCase):

    def test_idempotent(self):
        current = dense_run_under_hold(50.0)
        self.assertEqual(evaluate_overall_strain(current), evaluate_overall_strain(current))

    def test_four_key_overlap_scenario(self):
        sequence = build_sequence([(0.0, 500.0, 1), (100.0, 100.0, 0)])
        self.assertGreater(evaluate_overall_strain(sequence[1]), 1.0)

    def test_wrong_snapshot_length_raises(self):
        sequence = build_sequence([(0.0, 500.0, 1), (100.0, 100.0, 0)])
        with self.assertRaises(ValueError):
            OverallStrainEvaluator.evaluate_difficulty_of(sequence[1], [None] * 5)


if __name__ == "__main__":
    unittest.main()
