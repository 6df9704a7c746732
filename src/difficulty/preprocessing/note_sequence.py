"""
This module builds the append-only note arena the strain evaluators walk.

Notes are ordered by (start_time, column). Each column keeps a chain of arena
indices, and every note receives a snapshot holding, per column, the latest
note starting no later than itself. Notes sharing a start time are linked as
one chord: each sees its chord partners in the other columns, while its own
column slot stays its previous note in that column.
"""

from __future__ import annotations

from itertools import groupby
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional

from src.difficulty.preprocessing.difficulty_note import DifficultyNote

if TYPE_CHECKING:
    from src.difficulty.chart.note import Note


class NoteSequence:
    """An immutable, column-linked sequence of DifficultyNotes."""

    def __init__(self, total_columns: int):
        if not isinstance(total_columns, int) or total_columns <= 0:
            raise ValueError(
                f"total_columns must be a positive integer, got {total_columns!r}."
            )
        self.total_columns = total_columns
        self._notes: List[DifficultyNote] = []
        self._columns: List[List[int]] = [[] for _ in range(total_columns)]

    @classmethod
    def from_notes(cls, notes: Iterable["Note"], total_columns: int) -> "NoteSequence":
        """
        Sorts and validates the notes, then links them into a new sequence.

        Raises:
            ValueError: If a note breaks the column or timing invariants.
        """
        sequence = cls(total_columns)
        ordered = sorted(notes, key=lambda n: (n.start_time, n.column))
        latest: List[Optional[int]] = [None] * total_columns

        for start_time, group in groupby(ordered, key=lambda n: n.start_time):
            chord = list(group)
            before_chord = list(latest)
            first_index = len(sequence._notes)

            for offset, note in enumerate(chord):
                sequence._validate_note(note)
                if latest[note.column] is not None and latest[note.column] >= first_index:
                    raise ValueError(
                        f"Column {note.column} has two notes starting at {start_time}ms."
                    )
                latest[note.column] = first_index + offset

            for offset, note in enumerate(chord):
                snapshot = list(latest)
                snapshot[note.column] = before_chord[note.column]
                column_chain = sequence._columns[note.column]
                sequence._notes.append(
                    DifficultyNote(
                        sequence,
                        index=first_index + offset,
                        column_position=len(column_chain),
                        note=note,
                        previous_indices=tuple(snapshot),
                    )
                )
                column_chain.append(first_index + offset)

        return sequence

    def _validate_note(self, note: "Note") -> None:
        if not 0 <= note.column < self.total_columns:
            raise ValueError(
                f"Note column {note.column} is outside 0..{self.total_columns - 1}."
            )
        if note.start_time < 0:
            raise ValueError(f"Note start time must be non-negative, got {note.start_time}.")
        if note.end_time < note.start_time:
            raise ValueError(
                f"Note ends before it starts ({note.end_time} < {note.start_time})."
            )

    def column_note(self, column: int, position: int) -> Optional[DifficultyNote]:
        """Returns the note at `position` in a column chain, or None when out of range."""
        chain = self._columns[column]
        if 0 <= position < len(chain):
            return self._notes[chain[position]]
        return None

    def column_notes(self, column: int) -> List[DifficultyNote]:
        return [self._notes[idx] for idx in self._columns[column]]

    def __getitem__(self, index: int) -> DifficultyNote:
        return self._notes[index]

    def __len__(self) -> int:
        return len(self._notes)

    def __iter__(self) -> Iterator[DifficultyNote]:
        return iter(self._notes)

    def __repr__(self) -> str:
        per_column = ", ".join(str(len(chain)) for chain in self._columns)
        return f"<NoteSequence {self.total_columns}K ({len(self._notes)} notes: {per_column})>"
