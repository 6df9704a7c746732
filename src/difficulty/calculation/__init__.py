from .strain_config import StrainConfig
from .strain_result import StrainResult
from .strain_calculator import StrainCalculator

__all__ = ["StrainConfig", "StrainResult", "StrainCalculator"]
