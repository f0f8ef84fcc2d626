"""Domain exceptions for nutrition targets."""

from typing import Any


class NutritionTargetsDomainError(Exception):
    """Base exception for nutrition targets domain errors."""

    pass


class InvalidProfileError(NutritionTargetsDomainError):
    """Raised when a profile cannot be used for target calculation.

    Attributes:
        field: Name of the offending field (None when not field-specific)
        value: Offending raw value
    """

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value


# Short alias matching the error kind exposed by compute-targets.
InvalidProfile = InvalidProfileError
