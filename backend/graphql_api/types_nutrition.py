"""GraphQL types for nutrition targets and saved plans.

Profile labels are accepted as free strings so that legacy and localized
labels ("Muy activo", "bulk") go through the same mapping as the REST API;
the resolved profile is returned with proper enums.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional
from datetime import datetime
import strawberry


__all__ = [
    # Enums
    "GenderEnum",
    "ActivityLevelEnum",
    "GoalEnum",
    # Output types
    "EnergyBreakdownType",
    "ResolvedProfileType",
    "NutritionTargetsType",
    "NutritionRecordType",
    # Input types
    "NutritionTargetsInput",
    "SaveNutritionRecordInput",
]


# ============================================
# ENUMS
# ============================================


@strawberry.enum
class GenderEnum(str, Enum):
    MALE = "Male"
    FEMALE = "Female"


@strawberry.enum
class ActivityLevelEnum(str, Enum):
    """Activity level used for the TDEE multiplier."""

    SEDENTARY = "Sedentary"  # 1.2
    LIGHTLY_ACTIVE = "LightlyActive"  # 1.375
    NORMAL = "Normal"  # 1.55
    ACTIVE = "Active"  # 1.725
    VERY_ACTIVE = "VeryActive"  # 1.9


@strawberry.enum
class GoalEnum(str, Enum):
    GAIN = "Gain"  # +300 kcal
    LOSE = "Lose"  # -300 kcal
    MAINTAIN = "Maintain"


# ============================================
# OUTPUT TYPES
# ============================================


@strawberry.type
class EnergyBreakdownType:
    """Unrounded intermediate figures of the calculation."""

    bmr: float  # kcal/day
    activity_multiplier: float
    tdee: float  # kcal/day
    goal_offset: float  # kcal/day
    adjusted_calories: float  # kcal/day


@strawberry.type
class ResolvedProfileType:
    """Profile as understood by the calculator."""

    gender: GenderEnum
    age: float
    height: float
    weight: float
    trains_per_week: int
    activity_level: ActivityLevelEnum
    goal: GoalEnum
    defaulted_fields: List[str]


@strawberry.type
class NutritionTargetsType:
    """Daily targets with diagnostics."""

    calories: int  # kcal/day
    protein: int  # grams
    fat: int  # grams
    carbs: int  # grams
    macro_calories: int  # kcal implied by the macros (4-9-4 rule)
    warnings: List[str]
    breakdown: EnergyBreakdownType
    profile: ResolvedProfileType


@strawberry.type
class NutritionRecordType:
    """A saved nutrition plan."""

    id: str
    user_id: Optional[str]
    date: datetime
    gender: str
    age: float
    height: float
    weight: float
    trains_per_week: int
    activity: str
    goal: str
    calories: float
    protein: float
    fat: float
    carbs: float
    note: str
    created_at: datetime


# ============================================
# INPUT TYPES
# ============================================


@strawberry.input
class NutritionTargetsInput:
    age: float  # years
    height: float  # cm
    weight: float  # kg
    gender: Optional[str] = None
    trains_per_week: int = 0
    activity: Optional[str] = None
    goal: Optional[str] = None


@strawberry.input
class SaveNutritionRecordInput:
    """Plan to save. age/height/weight/calories and the macros are required."""

    age: Optional[float] = None
    height: Optional[float] = None
    weight: Optional[float] = None
    calories: Optional[float] = None
    protein: Optional[float] = None
    fat: Optional[float] = None
    carbs: Optional[float] = None
    gender: Optional[str] = None
    trains_per_week: Optional[int] = None
    activity: Optional[str] = None
    goal: Optional[str] = None
    note: Optional[str] = None
    date: Optional[datetime] = None
    user_id: Optional[str] = None
