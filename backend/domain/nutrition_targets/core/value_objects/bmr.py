"""BMR value object - Basal Metabolic Rate."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class BMR:
    """Basal Metabolic Rate in kcal/day.

    Estimated resting energy expenditure. The formula can go below zero
    for extreme biometrics; the value is kept unclamped.

    Attributes:
        value: BMR in kcal/day (finite)
    """

    value: float

    def __post_init__(self) -> None:
        """Validate BMR is a finite number.

        Raises:
            ValueError: If BMR is NaN or infinite
        """
        if not math.isfinite(self.value):
            raise ValueError(f"BMR must be finite, got {self.value}")

    def __str__(self) -> str:
        return f"{self.value:.0f} kcal/day"
