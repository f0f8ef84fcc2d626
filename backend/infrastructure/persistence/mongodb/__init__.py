"""MongoDB repository implementations."""

from .base import MongoBaseRepository
from .nutrition_record_repository import MongoNutritionRecordRepository
from .user_settings_repository import MongoUserSettingsRepository

__all__ = [
    "MongoBaseRepository",
    "MongoNutritionRecordRepository",
    "MongoUserSettingsRepository",
]
