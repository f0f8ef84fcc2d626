"""SaveUserSettingsCommand - store the settings screen snapshot."""

import logging
from dataclasses import dataclass
from typing import Optional

from application.nutrition_targets.queries.compute_targets import (
    ComputeTargetsQuery,
    ComputeTargetsQueryHandler,
)
from domain.nutrition_log.core.entities.user_settings import UserSettings
from domain.nutrition_log.core.ports.repository import IUserSettingsRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SaveUserSettingsCommand:
    """Command to save user settings.

    When ``calories`` is None the targets are computed from the profile
    fields before saving.
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


class SaveUserSettingsHandler:
    """Handler for SaveUserSettingsCommand."""

    def __init__(
        self,
        repository: IUserSettingsRepository,
        targets_handler: ComputeTargetsQueryHandler,
    ):
        self._repository = repository
        self._targets_handler = targets_handler

    async def handle(self, command: SaveUserSettingsCommand) -> UserSettings:
        """
        Handle save settings command.

        Raises:
            InvalidProfileError: If results must be computed and the
                profile is invalid
        """
        calories = command.calories
        protein, fat, carbs = command.protein, command.fat, command.carbs

        if calories is None:
            result = self._targets_handler.handle(
                ComputeTargetsQuery(
                    gender=command.gender,
                    age=command.age,
                    height=command.height,
                    weight=command.weight,
                    activity=command.activity,
                    goal=command.goal,
                    trains_per_week=command.trains_per_week,
                )
            )
            calories = result.targets.calories
            protein = result.targets.protein
            fat = result.targets.fat
            carbs = result.targets.carbs

        settings = UserSettings(
            gender=command.gender,
            age=command.age,
            height=command.height,
            weight=command.weight,
            trains_per_week=command.trains_per_week,
            activity=command.activity,
            goal=command.goal,
            calories=calories,
            protein=protein,
            fat=fat,
            carbs=carbs,
            user_id=command.user_id,
        )
        await self._repository.save(settings)

        logger.info(
            "User settings saved",
            extra={"settings_id": str(settings.settings_id), "user_id": settings.user_id},
        )
        return settings
