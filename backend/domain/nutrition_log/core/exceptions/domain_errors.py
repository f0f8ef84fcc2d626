"""Domain exceptions for nutrition log."""


class NutritionLogDomainError(Exception):
    """Base exception for nutrition log domain errors."""

    pass


class InvalidNutritionRecordError(NutritionLogDomainError):
    """Raised when a record is missing required data."""

    def __init__(self, missing_fields: list[str]):
        super().__init__(
            "Missing required fields (" + "/".join(missing_fields) + ")"
        )
        self.missing_fields = missing_fields


class UserSettingsNotFoundError(NutritionLogDomainError):
    """Raised when no user settings have been saved yet."""

    def __init__(self, user_id: str | None = None):
        scope = f" for user {user_id}" if user_id else ""
        super().__init__(f"No user settings saved{scope}")
        self.user_id = user_id
