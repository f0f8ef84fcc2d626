"""MongoDB implementation of IUserSettingsRepository."""

from typing import Any, Dict, Optional
from uuid import UUID

from domain.nutrition_log.core.entities.user_settings import UserSettings
from domain.nutrition_log.core.ports.repository import IUserSettingsRepository
from infrastructure.persistence.mongodb.base import MongoBaseRepository


class MongoUserSettingsRepository(MongoBaseRepository[UserSettings], IUserSettingsRepository):
    """Settings snapshots in the ``user_settings`` collection.

    Every save inserts a new snapshot; ``latest`` returns the newest one.
    """

    @property
    def collection_name(self) -> str:
        return "user_settings"

    def to_document(self, entity: UserSettings) -> Dict[str, Any]:
        return {
            "_id": str(entity.settings_id),
            "user_id": entity.user_id,
            "gender": entity.gender,
            "age": entity.age,
            "height": entity.height,
            "weight": entity.weight,
            "trains_per_week": entity.trains_per_week,
            "activity": entity.activity,
            "goal": entity.goal,
            "results": {
                "calories": entity.calories,
                "protein": entity.protein,
                "fat": entity.fat,
                "carbs": entity.carbs,
            },
            "created_at": self.datetime_to_storage(entity.created_at),
            "updated_at": self.datetime_to_storage(entity.updated_at),
        }

    def from_document(self, doc: Dict[str, Any]) -> UserSettings:
        results = doc.get("results") or {}
        try:
            return UserSettings(
                settings_id=UUID(doc["_id"]),
                user_id=doc.get("user_id"),
                gender=doc["gender"],
                age=doc["age"],
                height=doc["height"],
                weight=doc["weight"],
                trains_per_week=doc.get("trains_per_week", 0),
                activity=doc["activity"],
                goal=doc["goal"],
                calories=results.get("calories"),
                protein=results.get("protein"),
                fat=results.get("fat"),
                carbs=results.get("carbs"),
                created_at=self.datetime_from_storage(doc["created_at"]),
                updated_at=self.datetime_from_storage(doc["updated_at"]),
            )
        except KeyError as e:
            raise ValueError(f"User settings document missing field: {e}") from e

    async def save(self, settings: UserSettings) -> None:
        document = self.to_document(settings)
        await self._replace_one({"_id": document["_id"]}, document)

    async def latest(self, user_id: Optional[str] = None) -> Optional[UserSettings]:
        filter_dict: Dict[str, Any] = {"user_id": user_id} if user_id is not None else {}
        docs = await self._find_many(filter_dict, sort=[("created_at", -1)], limit=1)
        if not docs:
            return None
        return self.from_document(docs[0])
