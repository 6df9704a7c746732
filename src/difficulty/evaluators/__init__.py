from . import column_interaction
from .individual_strain_evaluator import IndividualStrainEvaluator, evaluate_individual_strain
from .overall_strain_evaluator import OverallStrainEvaluator, evaluate_overall_strain

__all__ = [
    "column_interaction",
    "IndividualStrainEvaluator",
    "evaluate_individual_strain",
    "OverallStrainEvaluator",
    "evaluate_overall_strain",
]
