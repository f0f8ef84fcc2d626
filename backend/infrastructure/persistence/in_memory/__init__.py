"""In-memory persistence implementations."""

from infrastructure.persistence.in_memory.nutrition_record_repository import (
    InMemoryNutritionRecordRepository,
)
from infrastructure.persistence.in_memory.user_settings_repository import (
    InMemoryUserSettingsRepository,
)

__all__ = [
    "InMemoryNutritionRecordRepository",
    "InMemoryUserSettingsRepository",
]
