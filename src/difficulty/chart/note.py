from dataclasses import dataclass


@dataclass(frozen=True)
class Note:
    """
    Represents a single immutable note in a chart. Times are in milliseconds
    and `end_time` equals `start_time` for a tap.
    """
    start_time: float
    end_time: float
    column: int

    @property
    def duration(self) -> float:
        return self.end_time - self.start_time
