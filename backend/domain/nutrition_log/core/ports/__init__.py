"""Ports for nutrition log domain."""

from .repository import INutritionRecordRepository, IUserSettingsRepository

__all__ = ["INutritionRecordRepository", "IUserSettingsRepository"]
