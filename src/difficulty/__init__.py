from .chart.note import Note
from .chart.chart_data import ChartData
from .chart.chart import Chart
from .chart.chart_factory import ChartFactory
from .preprocessing.difficulty_note import DifficultyNote
from .preprocessing.note_sequence import NoteSequence
from .evaluators.individual_strain_evaluator import (
    IndividualStrainEvaluator,
    evaluate_individual_strain,
)
from .evaluators.overall_strain_evaluator import (
    OverallStrainEvaluator,
    evaluate_overall_strain,
)
from .calculation.strain_config import StrainConfig
from .calculation.strain_result import StrainResult
from .calculation.strain_calculator import StrainCalculator

__all__ = [
    "Note",
    "ChartData",
    "Chart",
    "ChartFactory",
    "DifficultyNote",
    "NoteSequence",
    "IndividualStrainEvaluator",
    "evaluate_individual_strain",
    "OverallStrainEvaluator",
    "evaluate_overall_strain",
    "StrainConfig",
    "StrainResult",
    "StrainCalculator",
]
