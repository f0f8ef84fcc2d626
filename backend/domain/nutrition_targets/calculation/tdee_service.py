"""TDEEService - Total Daily Energy Expenditure calculation."""

from ..core.ports.calculators import ITDEECalculator
from ..core.value_objects.activity_level import ActivityLevel
from ..core.value_objects.bmr import BMR
from ..core.value_objects.tdee import TDEE


class TDEEService(ITDEECalculator):
    """Calculate Total Daily Energy Expenditure.

    Formula:
        TDEE = BMR x activity multiplier

    Multipliers:
        - Sedentary: 1.2
        - LightlyActive: 1.375
        - Normal: 1.55
        - Active: 1.725
        - VeryActive: 1.9
    """

    def calculate(self, bmr: BMR, activity_level: ActivityLevel) -> TDEE:
        """Calculate TDEE from BMR and activity level.

        Example:
            >>> TDEEService().calculate(BMR(value=1805.0), ActivityLevel.NORMAL).value
            2797.75
        """
        multiplier = activity_level.multiplier()
        return TDEE(value=bmr.value * multiplier, multiplier=multiplier)
