"""TDEE value object - Total Daily Energy Expenditure."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class TDEE:
    """Total Daily Energy Expenditure in kcal/day.

    Calculated as: TDEE = BMR x activity multiplier

    Attributes:
        value: TDEE in kcal/day (finite, follows the sign of BMR)
        multiplier: Activity multiplier that produced it
    """

    value: float
    multiplier: float

    def __post_init__(self) -> None:
        """Validate TDEE is a finite number.

        Raises:
            ValueError: If TDEE is NaN or infinite
        """
        if not math.isfinite(self.value):
            raise ValueError(f"TDEE must be finite, got {self.value}")

    def __str__(self) -> str:
        return f"{self.value:.0f} kcal/day (x{self.multiplier})"
