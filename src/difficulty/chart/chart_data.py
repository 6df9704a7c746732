from dataclasses import dataclass, field
from typing import Tuple

from src.difficulty.chart.note import Note


@dataclass(frozen=True)
class ChartData:
    """
    Represents the static, immutable data for a single chart, with its notes
    already parsed and checked against the chart's column count.
    """
    chart_id: str
    title: str
    difficulty: str
    columns: int
    notes: Tuple[Note, ...] = field(default_factory=tuple)
