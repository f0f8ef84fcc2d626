"""SaveNutritionRecordCommand - persist a nutrition plan."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from domain.nutrition_log.core.entities.nutrition_record import NutritionRecord
from domain.nutrition_log.core.ports.repository import INutritionRecordRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SaveNutritionRecordCommand:
    """Command to save a nutrition plan.

    Required values left as None are reported by the entity; optional
    fields left as None take the entity defaults.
    """

    age: Optional[float]
    height: Optional[float]
    weight: Optional[float]
    calories: Optional[float]
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


class SaveNutritionRecordHandler:
    """Handler for SaveNutritionRecordCommand.

    Creates the record entity (which validates required fields) and
    persists it.
    """

    def __init__(self, repository: INutritionRecordRepository):
        self._repository = repository

    async def handle(self, command: SaveNutritionRecordCommand) -> NutritionRecord:
        """
        Handle save command.

        Args:
            command: SaveNutritionRecordCommand

        Returns:
            NutritionRecord: The saved record

        Raises:
            InvalidNutritionRecordError: If age/height/weight/calories are
                missing or zero, or a macro is missing
        """
        optional = {
            "gender": command.gender,
            "trains_per_week": command.trains_per_week,
            "activity": command.activity,
            "goal": command.goal,
            "note": command.note,
            "date": command.date,
            "user_id": command.user_id,
        }
        record = NutritionRecord(
            age=command.age,
            height=command.height,
            weight=command.weight,
            calories=command.calories,
            protein=command.protein,
            fat=command.fat,
            carbs=command.carbs,
            **{k: v for k, v in optional.items() if v is not None},
        )
        await self._repository.save(record)

        logger.info(
            "Nutrition record saved",
            extra={
                "record_id": str(record.record_id),
                "user_id": record.user_id,
                "calories": record.calories,
            },
        )
        return record
