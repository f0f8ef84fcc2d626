"""Shared plumbing for the MongoDB repositories.

Every repository receives the motor client from the application container;
repositories never open connections of their own and never close the shared
client. Subclasses provide the collection name and the document mapping.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar
import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection

from infrastructure.config import get_mongodb_database

TEntity = TypeVar("TEntity")

logger = logging.getLogger(__name__)


class MongoBaseRepository(ABC, Generic[TEntity]):
    """
    Base class for MongoDB repositories.

    Subclasses must implement:
    - collection_name
    - to_document(): domain entity -> MongoDB document
    - from_document(): MongoDB document -> domain entity

    Documents are keyed by the entity's UUID (stored as a string in ``_id``).
    Errors from the driver are logged with the collection name and re-raised.
    """

    def __init__(
        self,
        client: AsyncIOMotorClient,
        database_name: Optional[str] = None,
    ):
        self._client = client
        self._database_name = database_name or get_mongodb_database()
        self._collection = self._client[self._database_name][self.collection_name]

        logger.info(
            "Initialized MongoDB repository",
            extra={
                "repository": self.__class__.__name__,
                "database": self._database_name,
                "collection": self.collection_name,
            },
        )

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """MongoDB collection name."""

    @abstractmethod
    def to_document(self, entity: TEntity) -> Dict[str, Any]:
        """Convert domain entity to MongoDB document."""

    @abstractmethod
    def from_document(self, doc: Dict[str, Any]) -> TEntity:
        """
        Convert MongoDB document to domain entity.

        Raises:
            ValueError: If document is missing required fields
        """

    @property
    def collection(self) -> AsyncIOMotorCollection:
        return self._collection

    @staticmethod
    def datetime_to_storage(dt: datetime) -> datetime:
        """Normalize to UTC; BSON dates carry no timezone."""
        if dt.tzinfo is None:
            raise ValueError("Datetime must be timezone-aware")
        return dt.astimezone(timezone.utc)

    @staticmethod
    def datetime_from_storage(value: Any) -> datetime:
        """Accept BSON datetimes and legacy ISO strings, returning aware UTC."""
        if isinstance(value, str):
            value = datetime.fromisoformat(value)
        if not isinstance(value, datetime):
            raise ValueError(f"Invalid stored datetime: {value!r}")
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value

    def _log_failure(self, operation: str, error: Exception, filter_dict: Any = None) -> None:
        logger.error(
            f"MongoDB {operation} failed",
            extra={
                "collection": self.collection_name,
                "filter": filter_dict,
                "error": str(error),
            },
        )

    async def _find_one(self, filter_dict: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        try:
            return await self._collection.find_one(filter_dict)
        except Exception as e:
            self._log_failure("find_one", e, filter_dict)
            raise

    async def _find_many(
        self,
        filter_dict: Dict[str, Any],
        sort: Optional[List[Tuple[str, int]]] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        try:
            cursor = self._collection.find(filter_dict)
            if sort:
                cursor = cursor.sort(sort)
            if limit:
                cursor = cursor.limit(limit)
            return await cursor.to_list(length=limit)
        except Exception as e:
            self._log_failure("find", e, filter_dict)
            raise

    async def _replace_one(self, filter_dict: Dict[str, Any], document: Dict[str, Any]) -> None:
        """Upsert a whole document."""
        try:
            await self._collection.replace_one(filter_dict, document, upsert=True)
        except Exception as e:
            self._log_failure("replace_one", e, filter_dict)
            raise
