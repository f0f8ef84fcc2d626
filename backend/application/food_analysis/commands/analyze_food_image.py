"""AnalyzeFoodImageCommand - estimate nutrition facts from a photo."""

import logging
import time
from dataclasses import dataclass
from typing import Optional

from domain.food_analysis.core.entities.food_analysis import FoodImageAnalysis
from domain.food_analysis.core.exceptions.domain_errors import InvalidImageError
from domain.food_analysis.core.ports.analysis_provider import IFoodAnalysisProvider

logger = logging.getLogger(__name__)

DEFAULT_MAX_IMAGE_BYTES = 5 * 1024 * 1024


@dataclass(frozen=True)
class AnalyzeFoodImageCommand:
    """Command with an uploaded image.

    Attributes:
        image_bytes: Raw file content
        mime_type: Declared content type (defaults to image/jpeg)
        filename: Original file name, for logging
    """

    image_bytes: bytes
    mime_type: Optional[str] = None
    filename: Optional[str] = None


class AnalyzeFoodImageHandler:
    """Handler for AnalyzeFoodImageCommand.

    Validates the upload size and forwards it to the analysis provider.
    """

    def __init__(
        self,
        provider: IFoodAnalysisProvider,
        max_image_bytes: int = DEFAULT_MAX_IMAGE_BYTES,
    ):
        self._provider = provider
        self._max_image_bytes = max_image_bytes

    async def handle(self, command: AnalyzeFoodImageCommand) -> FoodImageAnalysis:
        """
        Handle analyze image command.

        Args:
            command: AnalyzeFoodImageCommand

        Returns:
            FoodImageAnalysis from the provider

        Raises:
            InvalidImageError: Empty (400) or oversized (413) image
            FoodAnalysisError: If the provider call fails
        """
        size = len(command.image_bytes)
        if size == 0:
            raise InvalidImageError("No image uploaded", status_code=400)
        if size > self._max_image_bytes:
            max_mb = self._max_image_bytes / 1024 / 1024
            raise InvalidImageError(
                f"Image too large. Maximum size: {max_mb:g}MB", status_code=413
            )

        mime_type = command.mime_type or "image/jpeg"
        if not mime_type.startswith("image/"):
            mime_type = "image/jpeg"

        start = time.time()
        analysis = await self._provider.analyze_image(command.image_bytes, mime_type)

        logger.info(
            "Food image analyzed",
            extra={
                "file_name": command.filename,
                "size": size,
                "is_food": analysis.is_food,
                "elapsed_ms": int((time.time() - start) * 1000),
            },
        )
        return analysis
