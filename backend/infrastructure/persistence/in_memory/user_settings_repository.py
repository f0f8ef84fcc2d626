"""In-memory implementation of IUserSettingsRepository."""

from copy import deepcopy
from typing import List, Optional

from domain.nutrition_log.core.entities.user_settings import UserSettings
from domain.nutrition_log.core.ports.repository import IUserSettingsRepository


class InMemoryUserSettingsRepository(IUserSettingsRepository):
    """Keeps settings snapshots in insertion order."""

    def __init__(self) -> None:
        self._snapshots: List[UserSettings] = []

    async def save(self, settings: UserSettings) -> None:
        self._snapshots.append(deepcopy(settings))

    async def latest(self, user_id: Optional[str] = None) -> Optional[UserSettings]:
        for snapshot in reversed(self._snapshots):
            if user_id is None or snapshot.user_id == user_id:
                return deepcopy(snapshot)
        return None
