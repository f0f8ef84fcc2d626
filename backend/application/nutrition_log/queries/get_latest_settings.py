"""GetLatestUserSettingsQuery - read the last saved settings."""

from dataclasses import dataclass
from typing import Optional

from domain.nutrition_log.core.entities.user_settings import UserSettings
from domain.nutrition_log.core.exceptions.domain_errors import UserSettingsNotFoundError
from domain.nutrition_log.core.ports.repository import IUserSettingsRepository


@dataclass(frozen=True)
class GetLatestUserSettingsQuery:
    user_id: Optional[str] = None


class GetLatestUserSettingsQueryHandler:
    def __init__(self, repository: IUserSettingsRepository):
        self._repository = repository

    async def handle(self, query: GetLatestUserSettingsQuery) -> UserSettings:
        """
        Raises:
            UserSettingsNotFoundError: If nothing has been saved yet
        """
        settings = await self._repository.latest(user_id=query.user_id)
        if settings is None:
            raise UserSettingsNotFoundError(query.user_id)
        return settings
