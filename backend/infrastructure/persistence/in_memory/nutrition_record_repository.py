"""In-memory implementation of INutritionRecordRepository for testing."""

from copy import deepcopy
from typing import Dict, List, Optional
from uuid import UUID

from domain.nutrition_log.core.entities.nutrition_record import NutritionRecord
from domain.nutrition_log.core.ports.repository import INutritionRecordRepository


class InMemoryNutritionRecordRepository(INutritionRecordRepository):
    """
    In-memory nutrition record repository.

    Suitable for tests and local development. Data is lost when the
    application stops.
    """

    def __init__(self) -> None:
        self._records: Dict[UUID, NutritionRecord] = {}

    async def save(self, record: NutritionRecord) -> None:
        # Deep copy to prevent external mutations
        self._records[record.record_id] = deepcopy(record)

    async def find_by_id(self, record_id: UUID) -> Optional[NutritionRecord]:
        record = self._records.get(record_id)
        return deepcopy(record) if record else None

    async def list(
        self,
        user_id: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[NutritionRecord]:
        records = [
            r for r in self._records.values() if user_id is None or r.user_id == user_id
        ]
        records.sort(key=lambda r: (r.date, r.created_at), reverse=True)
        if limit is not None:
            records = records[:limit]
        return [deepcopy(r) for r in records]

