from typing import List

from src.difficulty.chart.chart_data import ChartData
from src.difficulty.chart.note import Note
from src.difficulty.preprocessing.note_sequence import NoteSequence


class Chart:
    """
    Represents a usable instance of a chart, providing easy access to its
    attributes and a formatted representation.
    """

    def __init__(self, chart_data: ChartData):
        self._data = chart_data

        self.chart_id: str = self._data.chart_id
        self.title: str = self._data.title
        self.difficulty: str = self._data.difficulty
        self.columns: int = self._data.columns

        self.notes: List[Note] = list(self._data.notes)

    @property
    def length(self) -> float:
        """The total length of the chart in milliseconds, based on the final note's end_time."""
        if not self.notes:
            return 0.0
        return max(note.end_time for note in self.notes)

    @property
    def hold_count(self) -> int:
        return sum(1 for note in self.notes if note.end_time > note.start_time)

    def to_sequence(self) -> NoteSequence:
        """Builds the column-linked note sequence the strain evaluators consume."""
        return NoteSequence.from_notes(self.notes, self.columns)

    def __repr__(self) -> str:
        """Provides a detailed summary of the chart."""
        header = f"<Chart id='{self.chart_id}' title='{self.title}'>"
        details = (
            f"  - Difficulty: {self.difficulty}\n"
            f"  - Keys: {self.columns}K\n"
            f"  - Length: {self.length:.0f}ms\n"
            f"  - Note Count: {len(self.notes)} ({self.hold_count} holds)"
        )

        notes_summary = "\n  - Notes:"
        if not self.notes:
            notes_summary += " None"
        else:
            for note in self.notes[:10]:
                notes_summary += f"\n    - {note}"
            if len(self.notes) > 10:
                notes_summary += f"\n    - ...and {len(self.notes) - 10} more entries."

        return f"{header}\n{details}{notes_summary}"
