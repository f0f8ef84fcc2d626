"""Repository ports for nutrition log persistence."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from ..entities.nutrition_record import NutritionRecord
from ..entities.user_settings import UserSettings


class INutritionRecordRepository(ABC):
    """Port for nutrition record persistence.

    Domain layer depends on this abstraction, not on concrete
    implementations (in-memory, MongoDB).
    """

    @abstractmethod
    async def save(self, record: NutritionRecord) -> None:
        """Save record (create or update).

        Args:
            record: Record to save
        """
        pass

    @abstractmethod
    async def find_by_id(self, record_id: UUID) -> Optional[NutritionRecord]:
        """Find record by ID.

        Args:
            record_id: Record identifier

        Returns:
            Optional[NutritionRecord]: Record if found, None otherwise
        """
        pass

    @abstractmethod
    async def list(
        self,
        user_id: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[NutritionRecord]:
        """List records, newest date first.

        Args:
            user_id: Restrict to one user (None = all records)
            limit: Max records to return (None = no limit)

        Returns:
            List[NutritionRecord]: Matching records
        """
        pass


class IUserSettingsRepository(ABC):
    """Port for user settings persistence."""

    @abstractmethod
    async def save(self, settings: UserSettings) -> None:
        """Save a settings snapshot."""
        pass

    @abstractmethod
    async def latest(self, user_id: Optional[str] = None) -> Optional[UserSettings]:
        """Return the most recently saved settings.

        Args:
            user_id: Restrict to one user (None = any user)

        Returns:
            Optional[UserSettings]: Latest snapshot, None if nothing saved
        """
        pass
