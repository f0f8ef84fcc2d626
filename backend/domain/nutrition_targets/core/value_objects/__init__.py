"""Value objects for nutrition targets domain."""

from .activity_level import ActivityLevel
from .bmr import BMR
from .gender import Gender
from .goal import Goal
from .macro_split import MacroSplit
from .nutrition_targets import EnergyBreakdown, NutritionTargets
from .profile import Profile
from .tdee import TDEE

__all__ = [
    "Gender",
    "ActivityLevel",
    "Goal",
    "Profile",
    "BMR",
    "TDEE",
    "MacroSplit",
    "EnergyBreakdown",
    "NutritionTargets",
]
