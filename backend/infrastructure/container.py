"""Application service container.

Builds the calculator, repositories, analysis provider, and handlers from
configuration. The FastAPI lifespan owns one container per app instance and
stores it on ``app.state.container``; REST dependencies and the GraphQL
context read it from there. Tests build a container directly and inject it.
"""

from dataclasses import dataclass, field
from typing import Optional
import logging

from motor.motor_asyncio import AsyncIOMotorClient

from application.food_analysis.commands.analyze_food_image import AnalyzeFoodImageHandler
from application.food_analysis.commands.send_chat_message import SendChatMessageHandler
from application.nutrition_log.commands.save_record import SaveNutritionRecordHandler
from application.nutrition_log.commands.save_user_settings import SaveUserSettingsHandler
from application.nutrition_log.queries.get_latest_settings import (
    GetLatestUserSettingsQueryHandler,
)
from application.nutrition_log.queries.get_record import GetNutritionRecordQueryHandler
from application.nutrition_log.queries.list_records import ListNutritionRecordsQueryHandler
from application.nutrition_targets.queries.compute_targets import ComputeTargetsQueryHandler
from domain.food_analysis.core.ports.analysis_provider import IFoodAnalysisProvider
from domain.nutrition_log.core.ports.repository import (
    INutritionRecordRepository,
    IUserSettingsRepository,
)
from domain.nutrition_targets.calculation.target_calculator import NutritionTargetCalculator
from domain.nutrition_targets.core.factories.profile_factory import ProfileFactory
from infrastructure.ai.factory import create_food_analysis_provider
from infrastructure.config import get_max_image_bytes, get_strict_profile_labels
from infrastructure.persistence.factory import (
    create_mongo_client,
    create_nutrition_record_repository,
    create_user_settings_repository,
    get_backend,
)

logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Everything a request needs, wired once per application."""

    calculator: NutritionTargetCalculator
    profile_factory: ProfileFactory
    record_repository: INutritionRecordRepository
    settings_repository: IUserSettingsRepository
    analysis_provider: IFoodAnalysisProvider
    max_image_bytes: int
    mongo_client: Optional[AsyncIOMotorClient] = None

    compute_targets: ComputeTargetsQueryHandler = field(init=False)
    save_record: SaveNutritionRecordHandler = field(init=False)
    list_records: ListNutritionRecordsQueryHandler = field(init=False)
    get_record: GetNutritionRecordQueryHandler = field(init=False)
    save_settings: SaveUserSettingsHandler = field(init=False)
    latest_settings: GetLatestUserSettingsQueryHandler = field(init=False)
    analyze_image: AnalyzeFoodImageHandler = field(init=False)
    send_chat: SendChatMessageHandler = field(init=False)

    _started: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        self.compute_targets = ComputeTargetsQueryHandler(self.calculator, self.profile_factory)
        self.save_record = SaveNutritionRecordHandler(self.record_repository)
        self.list_records = ListNutritionRecordsQueryHandler(self.record_repository)
        self.get_record = GetNutritionRecordQueryHandler(self.record_repository)
        self.save_settings = SaveUserSettingsHandler(
            self.settings_repository, self.compute_targets
        )
        self.latest_settings = GetLatestUserSettingsQueryHandler(self.settings_repository)
        self.analyze_image = AnalyzeFoodImageHandler(
            self.analysis_provider, max_image_bytes=self.max_image_bytes
        )
        self.send_chat = SendChatMessageHandler(self.analysis_provider)

    @property
    def started(self) -> bool:
        return self._started

    async def startup(self) -> None:
        """Open the provider session."""
        if self._started:
            return
        await self.analysis_provider.__aenter__()
        self._started = True
        logger.info(
            "container.started",
            extra={
                "provider": type(self.analysis_provider).__name__,
                "repository": type(self.record_repository).__name__,
            },
        )

    async def shutdown(self) -> None:
        """Close the provider session and the MongoDB client."""
        if self._started:
            self._started = False
            await self.analysis_provider.__aexit__(None, None, None)
        if self.mongo_client is not None:
            self.mongo_client.close()
            self.mongo_client = None
        logger.info("container.stopped")


def build_container(
    *,
    analysis_provider: Optional[IFoodAnalysisProvider] = None,
    record_repository: Optional[INutritionRecordRepository] = None,
    settings_repository: Optional[IUserSettingsRepository] = None,
) -> AppContainer:
    """Build a container from environment configuration.

    Explicit arguments override the configured adapters (used by tests).

    Raises:
        ValueError: On invalid backend/provider configuration
    """
    mongo_client = None
    needs_repositories = record_repository is None or settings_repository is None
    if needs_repositories and get_backend() == "mongodb":
        mongo_client = create_mongo_client()

    return AppContainer(
        calculator=NutritionTargetCalculator(),
        profile_factory=ProfileFactory(strict=get_strict_profile_labels()),
        record_repository=record_repository or create_nutrition_record_repository(mongo_client),
        settings_repository=settings_repository
        or create_user_settings_repository(mongo_client),
        analysis_provider=analysis_provider or create_food_analysis_provider(),
        max_image_bytes=get_max_image_bytes(),
        mongo_client=mongo_client,
    )
