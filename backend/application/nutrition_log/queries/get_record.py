"""GetNutritionRecordQuery - read one saved nutrition plan."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from domain.nutrition_log.core.entities.nutrition_record import NutritionRecord
from domain.nutrition_log.core.ports.repository import INutritionRecordRepository


@dataclass(frozen=True)
class GetNutritionRecordQuery:
    record_id: UUID


class GetNutritionRecordQueryHandler:
    """Look up a record by id; None when it does not exist."""

    def __init__(self, repository: INutritionRecordRepository):
        self._repository = repository

    async def handle(self, query: GetNutritionRecordQuery) -> Optional[NutritionRecord]:
        return await self._repository.find_by_id(query.record_id)
