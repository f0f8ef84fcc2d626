"""IFoodAnalysisProvider port - hosted model access."""

from typing import Protocol, runtime_checkable

from ..entities.food_analysis import FoodImageAnalysis


@runtime_checkable
class IFoodAnalysisProvider(Protocol):
    """Port for the hosted model used for photos and chat.

    Implementations are async context managers: sessions are opened in
    ``__aenter__`` and released in ``__aexit__``.
    """

    async def analyze_image(self, image_bytes: bytes, mime_type: str) -> FoodImageAnalysis:
        """Estimate nutrition facts for a food photo.

        Args:
            image_bytes: Raw image content
            mime_type: Image MIME type (e.g. "image/jpeg")

        Returns:
            FoodImageAnalysis with raw text and parsed facts

        Raises:
            FoodAnalysisError: If the provider call fails
        """
        ...

    async def chat(self, message: str) -> str:
        """Answer a free text nutrition question.

        Raises:
            FoodAnalysisError: If the provider call fails
        """
        ...

    async def __aenter__(self) -> "IFoodAnalysisProvider":
        ...

    async def __aexit__(self, exc_type: object, exc: object, tb: object) -> None:
        ...
