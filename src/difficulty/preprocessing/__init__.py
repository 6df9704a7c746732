from .difficulty_note import DifficultyNote
from .note_sequence import NoteSequence

__all__ = ["DifficultyNote", "NoteSequence"]
