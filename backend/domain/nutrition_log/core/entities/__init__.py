"""Entities for nutrition log domain."""

from .nutrition_record import NutritionRecord
from .user_settings import UserSettings

__all__ = ["NutritionRecord", "UserSettings"]
