"""OpenRouter client implementation for food photos and chat."""

from infrastructure.ai.openrouter.client import OpenRouterClient, parse_nutrition_facts
from infrastructure.ai.openrouter.models import NutritionFactsResponse

__all__ = [
    "OpenRouterClient",
    "NutritionFactsResponse",
    "parse_nutrition_facts",
]
