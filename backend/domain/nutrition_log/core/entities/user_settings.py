"""UserSettings entity - last profile entered in the settings screen."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class UserSettings:
    """Settings snapshot with the computed results.

    Attributes:
        gender: Gender label
        age: Age in years
        height: Height in cm
        weight: Weight in kg
        trains_per_week: Training sessions per week
        activity: Activity label
        goal: Goal label
        calories: Computed kcal/day (optional)
        protein: Computed grams/day (optional)
        fat: Computed grams/day (optional)
        carbs: Computed grams/day (optional)
        user_id: Optional owner id
    """

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
    user_id: Optional[str] = None
    settings_id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @property
    def has_results(self) -> bool:
        return self.calories is not None
