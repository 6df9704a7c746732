"""
This module loads charts from a JSON file of already-parsed note lists.

The file is an object keyed by chart id. Each record carries a title, a
difficulty name, a column count and a list of notes given as
{start_time, end_time, column}; end_time may be omitted for taps.
"""

import json
import warnings
from typing import Any, Dict, List, Optional, Tuple, Union

from src.difficulty.chart.chart import Chart
from src.difficulty.chart.chart_data import ChartData
from src.difficulty.chart.note import Note

ChartIdentifier = Union[str, Tuple[str, str]]


class ChartFactory:
    """
    Indexes every valid chart record of a JSON file and creates Chart
    instances by chart id or by (title, difficulty).

    Records that fail to parse, including any single bad note, are skipped
    with a warning so the rest of the file stays usable.
    """

    def __init__(self, charts_json_path: str):
        raw_data = self._load_json(charts_json_path)
        if not isinstance(raw_data, dict):
            raise TypeError("Charts data file must be a dictionary of objects.")

        self._charts: Dict[str, ChartData] = {}
        self._ids_by_title: Dict[Tuple[str, str], str] = {}
        for chart_id, record in raw_data.items():
            try:
                chart_data = self._parse_record(chart_id, record)
            except (KeyError, ValueError, TypeError) as e:
                warnings.warn(
                    f"Warning: Skipping invalid chart record with key '{chart_id}': {e}"
                )
                continue
            self._charts[chart_id] = chart_data
            self._ids_by_title[(chart_data.title, chart_data.difficulty)] = chart_id

    @staticmethod
    def _load_json(json_path: str) -> Any:
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (FileNotFoundError, json.JSONDecodeError) as e:
            raise RuntimeError(
                f"Failed to load or parse JSON from {json_path}: {e}"
            ) from e

    @classmethod
    def _parse_record(cls, chart_id: str, record: Dict[str, Any]) -> ChartData:
        columns = int(record["columns"])
        if columns <= 0:
            raise ValueError(f"column count must be positive, got {columns}")

        raw_notes = record.get("notes", [])
        if not isinstance(raw_notes, list):
            raise TypeError("notes must be a list")

        return ChartData(
            chart_id=chart_id,
            title=record.get("title", "Unknown Title"),
            difficulty=record.get("difficulty", "Unknown"),
            columns=columns,
            notes=tuple(cls._parse_note(raw, columns) for raw in raw_notes),
        )

    @staticmethod
    def _parse_note(raw_note: Dict[str, Any], columns: int) -> Note:
        start_time = float(raw_note["start_time"])
        end_time = float(raw_note.get("end_time", start_time))
        column = int(raw_note["column"])

        if not 0 <= column < columns:
            raise ValueError(f"note column {column} is outside 0..{columns - 1}")
        if start_time < 0:
            raise ValueError(f"note start time {start_time} is negative")
        if end_time < start_time:
            raise ValueError(f"note at {start_time}ms ends before it starts")

        return Note(start_time=start_time, end_time=end_time, column=column)

    @property
    def chart_ids(self) -> List[str]:
        return list(self._charts)

    def create_chart(self, identifier: ChartIdentifier) -> Optional[Chart]:
        """
        Creates a Chart from a chart id or a (title, difficulty) tuple.

        Returns:
            The Chart, or None (with a warning) if the identifier is
            malformed or unknown.
        """
        if isinstance(identifier, tuple) and len(identifier) == 2:
            chart_id = self._ids_by_title.get(identifier)
        elif isinstance(identifier, str):
            chart_id = identifier
        else:
            warnings.warn(
                f"Invalid identifier type: {type(identifier)}. Must be str or (str, str) tuple."
            )
            return None

        chart_data = self._charts.get(chart_id) if chart_id is not None else None
        if chart_data is None:
            warnings.warn(f"Error: Chart with identifier '{identifier}' not found.")
            return None
        return Chart(chart_data)
