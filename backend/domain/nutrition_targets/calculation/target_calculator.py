"""NutritionTargetCalculator - daily calorie and macro targets."""

import logging
from typing import Optional, Tuple

from ..core.ports.calculators import (
    IBMRCalculator,
    IMacroCalculator,
    INutritionTargetCalculator,
    ITDEECalculator,
)
from ..core.value_objects.nutrition_targets import EnergyBreakdown, NutritionTargets
from ..core.value_objects.profile import Profile
from .bmr_service import BMRService
from .macro_service import MacroService
from .rounding import round_half_away_from_zero
from .tdee_service import TDEEService

logger = logging.getLogger(__name__)


class NutritionTargetCalculator(INutritionTargetCalculator):
    """Turn a profile into a daily calorie target and macro split.

    Steps:
        1. BMR from biometrics and gender
        2. TDEE = BMR x activity multiplier
        3. adjusted = TDEE + goal offset (+300 / -300 / 0), floored at 0
        4. macros from the unrounded adjusted figure
        5. calories = round(adjusted), independently of step 4

    Stateless; safe to share across requests and tasks.
    """

    def __init__(
        self,
        bmr_service: Optional[IBMRCalculator] = None,
        tdee_service: Optional[ITDEECalculator] = None,
        macro_service: Optional[IMacroCalculator] = None,
    ) -> None:
        self._bmr_service = bmr_service or BMRService()
        self._tdee_service = tdee_service or TDEEService()
        self._macro_service = macro_service or MacroService()

    def breakdown(self, profile: Profile) -> EnergyBreakdown:
        """Compute the unrounded intermediate figures.

        Args:
            profile: Validated profile

        Returns:
            EnergyBreakdown: bmr, multiplier, tdee, offset, adjusted calories
        """
        bmr = self._bmr_service.calculate(profile)
        tdee = self._tdee_service.calculate(bmr, profile.activity_level)
        offset = profile.goal.calorie_offset()
        adjusted = tdee.value + offset

        if adjusted < 0:
            logger.warning(
                "Adjusted calories below zero, clamping calories to 0",
                extra={"bmr": bmr.value, "tdee": tdee.value, "goal": profile.goal.value},
            )
            adjusted = 0.0

        return EnergyBreakdown(
            bmr=bmr.value,
            activity_multiplier=tdee.multiplier,
            tdee=tdee.value,
            goal_offset=offset,
            adjusted_calories=adjusted,
        )

    def compute(self, profile: Profile) -> NutritionTargets:
        """Compute daily targets.

        Args:
            profile: Validated profile

        Returns:
            NutritionTargets: calories, protein, fat, carbs (integers)

        Example:
            >>> calculator = NutritionTargetCalculator()
            >>> profile = Profile(gender=Gender.MALE, age=25, height=180.0,
            ...                   weight=80.0, activity_level=ActivityLevel.NORMAL,
            ...                   goal=Goal.GAIN)
            >>> calculator.compute(profile)
            NutritionTargets(calories=3098, protein=232, fat=103, carbs=310)
        """
        targets, _ = self.compute_with_breakdown(profile)
        return targets

    def compute_with_breakdown(
        self, profile: Profile
    ) -> Tuple[NutritionTargets, EnergyBreakdown]:
        """Compute daily targets and return them with the unrounded figures.

        The breakdown is computed once and both rounding paths read from it.
        """
        energy = self.breakdown(profile)
        macros = self._macro_service.calculate(energy.adjusted_calories)
        targets = NutritionTargets.from_parts(
            calories=round_half_away_from_zero(energy.adjusted_calories),
            macros=macros,
        )

        if profile.defaulted_fields:
            logger.warning(
                "Targets computed with defaulted profile fields",
                extra={"defaulted_fields": list(profile.defaulted_fields)},
            )
        logger.debug(
            "Nutrition targets computed",
            extra={
                "bmr": energy.bmr,
                "tdee": energy.tdee,
                "adjusted_calories": energy.adjusted_calories,
                **targets.to_dict(),
            },
        )
        return targets, energy
