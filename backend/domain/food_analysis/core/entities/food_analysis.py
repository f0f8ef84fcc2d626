"""Food analysis results."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Healthiness(str, Enum):
    """Model verdict on the photographed food."""

    HEALTHY = "Healthy"
    UNHEALTHY = "Unhealthy"


@dataclass(frozen=True)
class NutritionFacts:
    """Nutrition facts estimated for one photographed meal.

    Attributes:
        calories: kcal
        protein: grams
        fat: grams
        carbohydrates: grams
        healthiness: Healthy/Unhealthy verdict, when given
    """

    calories: float
    protein: float
    fat: float
    carbohydrates: float
    healthiness: Optional[Healthiness] = None

    def __post_init__(self) -> None:
        for name in ("calories", "protein", "fat", "carbohydrates"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")


@dataclass(frozen=True)
class FoodImageAnalysis:
    """Outcome of an image analysis.

    The raw model text is always kept: clients of the mobile app render it
    directly. ``facts`` is None when the text could not be parsed (for
    instance when the photo contains no food).

    Attributes:
        raw_text: Model answer as returned
        facts: Parsed nutrition facts, if any
        model: Model that produced the answer
    """

    raw_text: str
    facts: Optional[NutritionFacts] = None
    model: Optional[str] = None

    @property
    def is_food(self) -> bool:
        return self.facts is not None
