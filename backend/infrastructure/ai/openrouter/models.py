"""Pydantic models for the JSON answers of the food analysis prompt.

The prompt asks for capitalized keys ("Calories", "Protein", ...) but models
do not always comply, so keys are matched case-insensitively.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from domain.food_analysis.core.entities.food_analysis import Healthiness, NutritionFacts

_KEY_ALIASES = {
    "calories": "Calories",
    "kcal": "Calories",
    "protein": "Protein",
    "proteins": "Protein",
    "fat": "Fat",
    "fats": "Fat",
    "carbohydrates": "Carbohydrates",
    "carbs": "Carbohydrates",
    "healthiness": "Healthiness",
}


class NutritionFactsResponse(BaseModel):
    """Nutrition facts as returned by the model."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    calories: float = Field(..., ge=0, alias="Calories")
    protein: float = Field(..., ge=0, alias="Protein")
    fat: float = Field(..., ge=0, alias="Fat")
    carbohydrates: float = Field(..., ge=0, alias="Carbohydrates")
    healthiness: Optional[Healthiness] = Field(default=None, alias="Healthiness")

    @model_validator(mode="before")
    @classmethod
    def _normalize_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        normalized = {}
        for key, value in data.items():
            canonical = _KEY_ALIASES.get(str(key).strip().lower(), key)
            normalized[canonical] = value
        return normalized

    @field_validator("healthiness", mode="before")
    @classmethod
    def _parse_healthiness(cls, value: Any) -> Optional[Healthiness]:
        if value is None or isinstance(value, Healthiness):
            return value
        text = str(value).strip().lower()
        for member in Healthiness:
            if member.value.lower() == text:
                return member
        return None

    def to_domain(self) -> NutritionFacts:
        return NutritionFacts(
            calories=self.calories,
            protein=self.protein,
            fat=self.fat,
            carbohydrates=self.carbohydrates,
            healthiness=self.healthiness,
        )
