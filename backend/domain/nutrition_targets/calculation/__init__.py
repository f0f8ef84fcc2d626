"""Calculation services for nutrition targets."""

from .bmr_service import BMRService
from .macro_service import MacroService
from .rounding import round_half_away_from_zero
from .target_calculator import NutritionTargetCalculator
from .tdee_service import TDEEService

__all__ = [
    "BMRService",
    "TDEEService",
    "MacroService",
    "NutritionTargetCalculator",
    "round_half_away_from_zero",
]
