"""MongoDB implementation of INutritionRecordRepository."""

from typing import Any, Dict, List, Optional
from uuid import UUID

from domain.nutrition_log.core.entities.nutrition_record import NutritionRecord
from domain.nutrition_log.core.ports.repository import INutritionRecordRepository
from infrastructure.persistence.mongodb.base import MongoBaseRepository


class MongoNutritionRecordRepository(
    MongoBaseRepository[NutritionRecord], INutritionRecordRepository
):
    """Stores saved nutrition plans in the ``nutrition_records`` collection.

    Document schema:
    {
        "_id": "uuid-string",
        "user_id": "user123" | null,
        "date": ISODate,
        "age": 30, "height": 180, "weight": 80,
        "gender": "Male", "trains_per_week": 3,
        "activity": "Active", "goal": "Gain",
        "calories": 3098, "protein": 232, "fat": 103, "carbs": 310,
        "note": "",
        "created_at": ISODate, "updated_at": ISODate
    }
    """

    @property
    def collection_name(self) -> str:
        return "nutrition_records"

    def to_document(self, entity: NutritionRecord) -> Dict[str, Any]:
        return {
            "_id": str(entity.record_id),
            "user_id": entity.user_id,
            "date": self.datetime_to_storage(entity.date),
            "age": entity.age,
            "height": entity.height,
            "weight": entity.weight,
            "gender": entity.gender,
            "trains_per_week": entity.trains_per_week,
            "activity": entity.activity,
            "goal": entity.goal,
            "calories": entity.calories,
            "protein": entity.protein,
            "fat": entity.fat,
            "carbs": entity.carbs,
            "note": entity.note,
            "created_at": self.datetime_to_storage(entity.created_at),
            "updated_at": self.datetime_to_storage(entity.updated_at),
        }

    def from_document(self, doc: Dict[str, Any]) -> NutritionRecord:
        try:
            return NutritionRecord(
                record_id=UUID(doc["_id"]),
                user_id=doc.get("user_id"),
                date=self.datetime_from_storage(doc["date"]),
                age=doc["age"],
                height=doc["height"],
                weight=doc["weight"],
                gender=doc.get("gender", "Male"),
                trains_per_week=doc.get("trains_per_week", 0),
                activity=doc.get("activity", "Normal"),
                goal=doc.get("goal", "Maintain"),
                calories=doc["calories"],
                protein=doc.get("protein", 0),
                fat=doc.get("fat", 0),
                carbs=doc.get("carbs", 0),
                note=doc.get("note", ""),
                created_at=self.datetime_from_storage(doc["created_at"]),
                updated_at=self.datetime_from_storage(doc["updated_at"]),
            )
        except KeyError as e:
            raise ValueError(f"Nutrition record document missing field: {e}") from e

    async def save(self, record: NutritionRecord) -> None:
        document = self.to_document(record)
        await self._replace_one({"_id": document["_id"]}, document)

    async def find_by_id(self, record_id: UUID) -> Optional[NutritionRecord]:
        doc = await self._find_one({"_id": str(record_id)})
        if doc is None:
            return None
        return self.from_document(doc)

    async def list(
        self,
        user_id: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[NutritionRecord]:
        docs = await self._find_many(
            self._user_filter(user_id),
            sort=[("date", -1), ("created_at", -1)],
            limit=limit,
        )
        return [self.from_document(doc) for doc in docs]

    @staticmethod
    def _user_filter(user_id: Optional[str]) -> Dict[str, Any]:
        return {"user_id": user_id} if user_id is not None else {}
