"""NutritionTargets and EnergyBreakdown value objects."""

from dataclasses import dataclass

from .macro_split import MacroSplit


@dataclass(frozen=True)
class EnergyBreakdown:
    """Unrounded intermediate figures of a target calculation.

    Attributes:
        bmr: Basal metabolic rate (kcal/day)
        activity_multiplier: Multiplier applied to BMR
        tdee: BMR x multiplier (kcal/day)
        goal_offset: Offset applied for the goal (kcal/day)
        adjusted_calories: Goal-adjusted calories, clamped at 0 (kcal/day)
    """

    bmr: float
    activity_multiplier: float
    tdee: float
    goal_offset: float
    adjusted_calories: float


@dataclass(frozen=True)
class NutritionTargets:
    """Daily calorie target and macro split.

    Attributes:
        calories: kcal/day
        protein: grams/day
        fat: grams/day
        carbs: grams/day
    """

    calories: int
    protein: int
    fat: int
    carbs: int

    def __post_init__(self) -> None:
        for name in ("calories", "protein", "fat", "carbs"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    @classmethod
    def from_parts(cls, calories: int, macros: MacroSplit) -> "NutritionTargets":
        return cls(
            calories=calories,
            protein=macros.protein_g,
            fat=macros.fat_g,
            carbs=macros.carbs_g,
        )

    @property
    def macro_split(self) -> MacroSplit:
        return MacroSplit(protein_g=self.protein, fat_g=self.fat, carbs_g=self.carbs)

    def macro_calories(self) -> int:
        """kcal implied by the macro grams (4/9/4 rule)."""
        return self.macro_split.total_calories()

    def to_dict(self) -> dict[str, int]:
        return {
            "calories": self.calories,
            "protein": self.protein,
            "fat": self.fat,
            "carbs": self.carbs,
        }
