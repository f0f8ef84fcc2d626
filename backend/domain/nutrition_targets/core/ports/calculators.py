"""Calculator ports - interfaces for BMR/TDEE/Macro/target calculations."""

from abc import ABC, abstractmethod
from typing import Tuple

from ..value_objects.activity_level import ActivityLevel
from ..value_objects.bmr import BMR
from ..value_objects.macro_split import MacroSplit
from ..value_objects.nutrition_targets import EnergyBreakdown, NutritionTargets
from ..value_objects.profile import Profile
from ..value_objects.tdee import TDEE


class IBMRCalculator(ABC):
    """Port for BMR calculation."""

    @abstractmethod
    def calculate(self, profile: Profile) -> BMR:
        """Calculate BMR from a profile.

        Args:
            profile: Biometric profile

        Returns:
            BMR: Calculated basal metabolic rate
        """
        pass


class ITDEECalculator(ABC):
    """Port for TDEE calculation."""

    @abstractmethod
    def calculate(self, bmr: BMR, activity_level: ActivityLevel) -> TDEE:
        """Calculate TDEE from BMR and activity level.

        Args:
            bmr: Basal metabolic rate
            activity_level: Activity level

        Returns:
            TDEE: Total daily energy expenditure
        """
        pass


class IMacroCalculator(ABC):
    """Port for macronutrient split calculation."""

    @abstractmethod
    def calculate(self, calories: float) -> MacroSplit:
        """Split a calorie figure into protein/fat/carbs grams.

        Args:
            calories: Goal-adjusted, unrounded calories

        Returns:
            MacroSplit: Grams of each macronutrient
        """
        pass


class INutritionTargetCalculator(ABC):
    """Port for the compute-targets operation."""

    @abstractmethod
    def breakdown(self, profile: Profile) -> EnergyBreakdown:
        """Return the unrounded intermediate figures for a profile."""
        pass

    @abstractmethod
    def compute(self, profile: Profile) -> NutritionTargets:
        """Compute daily targets for a profile.

        Total over valid profiles: invalid biometrics are rejected when the
        Profile is built, so this never raises for a constructed profile.
        """
        pass

    @abstractmethod
    def compute_with_breakdown(
        self, profile: Profile
    ) -> Tuple[NutritionTargets, EnergyBreakdown]:
        """Compute daily targets together with the figures they came from."""
        pass
