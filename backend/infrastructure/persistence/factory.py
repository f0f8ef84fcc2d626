"""Repository Factory for Persistence Layer.

Environment-based repository selection:
- REPOSITORY_BACKEND=inmemory (default): fast, transient, used by tests
- REPOSITORY_BACKEND=mongodb: persistent, requires MONGODB_URI

The factory never caches instances. The application container owns the
repositories and the shared motor client for the lifetime of the app.

Usage:
    client = create_mongo_client()  # only for the mongodb backend
    records = create_nutrition_record_repository(client)
    settings = create_user_settings_repository(client)
"""

from typing import Optional
import logging

from motor.motor_asyncio import AsyncIOMotorClient

from domain.nutrition_log.core.ports.repository import (
    INutritionRecordRepository,
    IUserSettingsRepository,
)
from infrastructure.config import get_mongodb_uri, get_repository_backend
from infrastructure.persistence.in_memory import (
    InMemoryNutritionRecordRepository,
    InMemoryUserSettingsRepository,
)
from infrastructure.persistence.mongodb import (
    MongoNutritionRecordRepository,
    MongoUserSettingsRepository,
)

logger = logging.getLogger(__name__)

SUPPORTED_BACKENDS = ("inmemory", "mongodb")


def get_backend() -> str:
    """Return the configured backend, validating its value.

    Raises:
        ValueError: If REPOSITORY_BACKEND holds an unknown value
    """
    backend = get_repository_backend()
    if backend not in SUPPORTED_BACKENDS:
        raise ValueError(
            f"Unknown REPOSITORY_BACKEND '{backend}'. "
            f"Supported: {', '.join(SUPPORTED_BACKENDS)}"
        )
    return backend


def create_mongo_client() -> AsyncIOMotorClient:
    """Create the shared motor client from MONGODB_URI.

    Raises:
        ValueError: If MONGODB_URI is not set
    """
    uri = get_mongodb_uri()
    if not uri:
        raise ValueError(
            "REPOSITORY_BACKEND=mongodb but MONGODB_URI not set. "
            "Set MONGODB_URI in .env or use REPOSITORY_BACKEND=inmemory"
        )
    logger.info("Creating MongoDB client")
    return AsyncIOMotorClient(uri)


def create_nutrition_record_repository(
    client: Optional[AsyncIOMotorClient] = None,
) -> INutritionRecordRepository:
    """Create nutrition record repository based on REPOSITORY_BACKEND.

    Args:
        client: Shared motor client, required for the mongodb backend

    Raises:
        ValueError: If mongodb is selected and no client is given
    """
    if get_backend() == "mongodb":
        if client is None:
            raise ValueError("MongoDB backend requires a motor client")
        return MongoNutritionRecordRepository(client)
    return InMemoryNutritionRecordRepository()


def create_user_settings_repository(
    client: Optional[AsyncIOMotorClient] = None,
) -> IUserSettingsRepository:
    """Create user settings repository based on REPOSITORY_BACKEND."""
    if get_backend() == "mongodb":
        if client is None:
            raise ValueError("MongoDB backend requires a motor client")
        return MongoUserSettingsRepository(client)
    return InMemoryUserSettingsRepository()
