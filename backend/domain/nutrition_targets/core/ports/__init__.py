"""Ports for nutrition targets domain."""

from .calculators import (
    IBMRCalculator,
    IMacroCalculator,
    INutritionTargetCalculator,
    ITDEECalculator,
)

__all__ = [
    "IBMRCalculator",
    "ITDEECalculator",
    "IMacroCalculator",
    "INutritionTargetCalculator",
]
