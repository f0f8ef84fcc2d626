"""Domain exceptions for nutrition targets."""

from .domain_errors import (
    InvalidProfile,
    InvalidProfileError,
    NutritionTargetsDomainError,
)

__all__ = [
    "NutritionTargetsDomainError",
    "InvalidProfileError",
    "InvalidProfile",
]
