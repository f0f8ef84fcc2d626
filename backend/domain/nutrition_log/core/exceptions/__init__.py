"""Domain exceptions for nutrition log."""

from .domain_errors import (
    InvalidNutritionRecordError,
    NutritionLogDomainError,
    UserSettingsNotFoundError,
)

__all__ = [
    "NutritionLogDomainError",
    "InvalidNutritionRecordError",
    "UserSettingsNotFoundError",
]
