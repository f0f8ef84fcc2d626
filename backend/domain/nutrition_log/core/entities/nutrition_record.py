"""NutritionRecord entity - a saved daily nutrition plan."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from ..exceptions.domain_errors import InvalidNutritionRecordError


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class NutritionRecord:
    """A nutrition plan saved by the user.

    Stores the profile inputs next to the targets that were shown, so the
    history stays readable even if the formula changes.

    Attributes:
        age: Age in years (required, non-zero)
        height: Height in cm (required, non-zero)
        weight: Weight in kg (required, non-zero)
        calories: kcal/day (required, non-zero)
        protein: grams/day (required, zero allowed)
        fat: grams/day (required, zero allowed)
        carbs: grams/day (required, zero allowed)
        gender: Gender label as sent by the client
        trains_per_week: Training sessions per week
        activity: Activity label as sent by the client
        goal: Goal label as sent by the client
        note: Free text note
        date: Day the plan refers to (timezone-aware)
        user_id: Optional owner id
        record_id: Unique identifier
        created_at: Creation timestamp
        updated_at: Last update timestamp
    """

    age: float
    height: float
    weight: float
    calories: float
    protein: float
    fat: float
    carbs: float
    gender: str = "Male"
    trains_per_week: int = 0
    activity: str = "Normal"
    goal: str = "Maintain"
    note: str = ""
    date: datetime = field(default_factory=_utcnow)
    user_id: Optional[str] = None
    record_id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        """Validate required fields.

        Raises:
            InvalidNutritionRecordError: If age/height/weight/calories are
                missing or zero, or protein/fat/carbs are missing
        """
        missing = [
            name
            for name in ("age", "height", "weight", "calories")
            if not getattr(self, name)
        ]
        missing += [
            name for name in ("protein", "fat", "carbs") if getattr(self, name) is None
        ]
        if missing:
            raise InvalidNutritionRecordError(missing)
        if self.date.tzinfo is None:
            self.date = self.date.replace(tzinfo=timezone.utc)
