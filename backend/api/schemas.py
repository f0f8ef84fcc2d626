"""Request/response models for the REST endpoints.

JSON fields are camelCase (``trainsPerWeek``, ``userId``) as sent by the
mobile app; Python attributes stay snake_case.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from application.nutrition_targets.queries.compute_targets import ComputeTargetsResult
from domain.food_analysis.core.entities.food_analysis import NutritionFacts
from domain.nutrition_log.core.entities.nutrition_record import NutritionRecord
from domain.nutrition_log.core.entities.user_settings import UserSettings


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Profile numbers are strict: "80" or true are type errors (422), while
# zero/negative values reach the calculator and come back as 400.
class CalculateNutritionRequest(CamelModel):
    gender: Optional[str] = None
    age: float = Field(..., strict=True)
    height: float = Field(..., strict=True)
    weight: float = Field(..., strict=True)
    trains_per_week: int = Field(default=0, ge=0)
    activity: Optional[str] = None
    goal: Optional[str] = None


class EnergyBreakdownResponse(CamelModel):
    bmr: float
    activity_multiplier: float
    tdee: float
    goal_offset: float
    adjusted_calories: float


class CalculateNutritionResponse(CamelModel):
    calories: int
    protein: int
    fat: int
    carbs: int
    warnings: List[str] = Field(default_factory=list)
    breakdown: Optional[EnergyBreakdownResponse] = None

    @classmethod
    def from_result(
        cls, result: ComputeTargetsResult, include_breakdown: bool = False
    ) -> "CalculateNutritionResponse":
        breakdown = None
        if include_breakdown:
            b = result.breakdown
            breakdown = EnergyBreakdownResponse(
                bmr=b.bmr,
                activity_multiplier=b.activity_multiplier,
                tdee=b.tdee,
                goal_offset=b.goal_offset,
                adjusted_calories=b.adjusted_calories,
            )
        return cls(**result.targets.to_dict(), warnings=result.warnings, breakdown=breakdown)


class SaveNutritionRequest(CamelModel):
    """All fields optional: missing required values are reported as 400."""

    gender: Optional[str] = None
    age: Optional[float] = None
    height: Optional[float] = None
    weight: Optional[float] = None
    trains_per_week: Optional[int] = Field(default=None, ge=0)
    activity: Optional[str] = None
    goal: Optional[str] = None
    calories: Optional[float] = None
    protein: Optional[float] = None
    fat: Optional[float] = None
    carbs: Optional[float] = None
    note: Optional[str] = None
    date: Optional[datetime] = None
    user_id: Optional[str] = None


class NutritionRecordResponse(CamelModel):
    id: str
    user_id: Optional[str] = None
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
    updated_at: datetime

    @classmethod
    def from_entity(cls, record: NutritionRecord) -> "NutritionRecordResponse":
        return cls(
            id=str(record.record_id),
            user_id=record.user_id,
            date=record.date,
            gender=record.gender,
            age=record.age,
            height=record.height,
            weight=record.weight,
            trains_per_week=record.trains_per_week,
            activity=record.activity,
            goal=record.goal,
            calories=record.calories,
            protein=record.protein,
            fat=record.fat,
            carbs=record.carbs,
            note=record.note,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )


class SaveNutritionResponse(BaseModel):
    message: str = "Nutrition plan saved successfully"
    data: NutritionRecordResponse


class UserSettingsRequest(CamelModel):
    gender: str
    age: float = Field(..., strict=True)
    height: float = Field(..., strict=True)
    weight: float = Field(..., strict=True)
    trains_per_week: int = Field(default=0, ge=0)
    activity: str
    goal: str
    calories: Optional[float] = None
    protein: Optional[float] = None
    fat: Optional[float] = None
    carbs: Optional[float] = None
    user_id: Optional[str] = None


class UserSettingsResponse(CamelModel):
    id: str
    user_id: Optional[str] = None
    gender: str
    age: float
    height: float
    weight: float
    trains_per_week: int
    activity: str
    goal: str
    calories: Optional[float] = None
    protein: Optional[float] = None
    fat: Optional[float] = None
    carbs: Optional[float] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, settings: UserSettings) -> "UserSettingsResponse":
        return cls(
            id=str(settings.settings_id),
            user_id=settings.user_id,
            gender=settings.gender,
            age=settings.age,
            height=settings.height,
            weight=settings.weight,
            trains_per_week=settings.trains_per_week,
            activity=settings.activity,
            goal=settings.goal,
            calories=settings.calories,
            protein=settings.protein,
            fat=settings.fat,
            carbs=settings.carbs,
            created_at=settings.created_at,
        )


class NutritionFactsResponse(BaseModel):
    calories: float
    protein: float
    fat: float
    carbohydrates: float
    healthiness: Optional[str] = None

    @classmethod
    def from_entity(cls, facts: NutritionFacts) -> "NutritionFactsResponse":
        return cls(
            calories=facts.calories,
            protein=facts.protein,
            fat=facts.fat,
            carbohydrates=facts.carbohydrates,
            healthiness=facts.healthiness.value if facts.healthiness else None,
        )


class CheckFoodResponse(BaseModel):
    result: str
    analysis: Optional[NutritionFactsResponse] = None


class ChatRequest(BaseModel):
    message: str


class ChatResponse(BaseModel):
    reply: str
