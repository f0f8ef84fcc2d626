"""Provider Factory for the food analysis model.

Environment-based provider selection:
- VISION_PROVIDER=openrouter: hosted model via OpenRouter (requires OPENROUTER_API_KEY)
- VISION_PROVIDER=stub (default): deterministic stub, no network

Usage:
    from infrastructure.ai.factory import create_food_analysis_provider

    provider = create_food_analysis_provider()
    async with provider:
        analysis = await provider.analyze_image(data, "image/jpeg")
"""

import logging

from domain.food_analysis.core.ports.analysis_provider import IFoodAnalysisProvider
from infrastructure.ai.openrouter.client import OpenRouterClient
from infrastructure.ai.stub_provider import StubFoodAnalysisProvider
from infrastructure.config import (
    get_chat_model,
    get_openrouter_api_key,
    get_openrouter_base_url,
    get_vision_model,
    get_vision_provider_mode,
    mask_secret,
)

logger = logging.getLogger(__name__)


def create_food_analysis_provider() -> IFoodAnalysisProvider:
    """Create food analysis provider based on VISION_PROVIDER env var.

    Returns:
        IFoodAnalysisProvider: Provider instance

    Raises:
        ValueError: If openrouter is selected without OPENROUTER_API_KEY,
            or VISION_PROVIDER holds an unknown value
    """
    mode = get_vision_provider_mode()

    if mode == "openrouter":
        api_key = get_openrouter_api_key()
        if not api_key:
            raise ValueError(
                "VISION_PROVIDER=openrouter but OPENROUTER_API_KEY not set. "
                "Set OPENROUTER_API_KEY in .env or use VISION_PROVIDER=stub"
            )
        logger.info(
            "Using OpenRouter food analysis provider",
            extra={
                "model": get_vision_model(),
                "chat_model": get_chat_model(),
                "api_key": mask_secret(api_key),
            },
        )
        return OpenRouterClient(
            api_key=api_key,
            base_url=get_openrouter_base_url(),
            model=get_vision_model(),
            chat_model=get_chat_model(),
        )

    if mode != "stub":
        raise ValueError(f"Unknown VISION_PROVIDER '{mode}'. Supported: openrouter, stub")

    logger.info("Using stub food analysis provider")
    return StubFoodAnalysisProvider()
