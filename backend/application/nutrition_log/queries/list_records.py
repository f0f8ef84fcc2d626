"""ListNutritionRecordsQuery - read saved nutrition plans."""

from dataclasses import dataclass
from typing import List, Optional

from domain.nutrition_log.core.entities.nutrition_record import NutritionRecord
from domain.nutrition_log.core.ports.repository import INutritionRecordRepository

MAX_LIMIT = 500


@dataclass(frozen=True)
class ListNutritionRecordsQuery:
    """Query for saved records.

    Attributes:
        user_id: Only records of this user (None = all)
        limit: Max records (clamped to 1..500, None = no limit)
    """

    user_id: Optional[str] = None
    limit: Optional[int] = None


class ListNutritionRecordsQueryHandler:
    """Read-only access to saved records, newest first."""

    def __init__(self, repository: INutritionRecordRepository):
        self._repository = repository

    async def handle(self, query: ListNutritionRecordsQuery) -> List[NutritionRecord]:
        limit = query.limit
        if limit is not None:
            limit = max(1, min(limit, MAX_LIMIT))
        return await self._repository.list(user_id=query.user_id, limit=limit)
