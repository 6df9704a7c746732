from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from src.difficulty.chart.note import Note
    from src.difficulty.preprocessing.note_sequence import NoteSequence


class DifficultyNote:
    """
    A note placed inside a NoteSequence.

    Neighbours are not held directly: the note stores its arena index, its
    position in its column chain and a snapshot of optional arena indices for
    the latest note in every column. All navigation resolves those indices
    through the owning sequence, which is never mutated after it is built.
    """

    __slots__ = ("_sequence", "index", "column_position", "note", "_previous_indices")

    def __init__(
        self,
        sequence: "NoteSequence",
        index: int,
        column_position: int,
        note: "Note",
        previous_indices: Tuple[Optional[int], ...],
    ):
        self._sequence = sequence
        self.index = index
        self.column_position = column_position
        self.note = note
        self._previous_indices = previous_indices

    @property
    def start_time(self) -> float:
        return self.note.start_time

    @property
    def end_time(self) -> float:
        return self.note.end_time

    @property
    def column(self) -> int:
        return self.note.column

    @property
    def total_columns(self) -> int:
        return self._sequence.total_columns

    @property
    def previous_indices(self) -> Tuple[Optional[int], ...]:
        return self._previous_indices

    @property
    def previous_notes(self) -> Tuple[Optional["DifficultyNote"], ...]:
        """The latest note in every column processed before this one, or None per slot."""
        return tuple(
            None if idx is None else self._sequence[idx] for idx in self._previous_indices
        )

    def next_in_column(self, depth: int = 0) -> Optional["DifficultyNote"]:
        """The note `depth + 1` places later in this note's column, or None past the end."""
        return self._sequence.column_note(self.column, self.column_position + depth + 1)

    def prev_in_column(self, depth: int = 0) -> Optional["DifficultyNote"]:
        """The note `depth + 1` places earlier in this note's column, or None past the start."""
        return self._sequence.column_note(self.column, self.column_position - depth - 1)

    def __repr__(self) -> str:
        return (
            f"DifficultyNote(index={self.index}, start_time={self.start_time}, "
            f"end_time={self.end_time}, column={self.column})"
        )
