"""Stub food analysis provider for testing.

Returns deterministic answers without calling external APIs. Used by tests
and local development (VISION_PROVIDER=stub).
"""

import json

from domain.food_analysis.core.entities.food_analysis import (
    FoodImageAnalysis,
    Healthiness,
    NutritionFacts,
)

STUB_MODEL = "stub"

STUB_FACTS = NutritionFacts(
    calories=520,
    protein=32,
    fat=18,
    carbohydrates=55,
    healthiness=Healthiness.HEALTHY,
)


class StubFoodAnalysisProvider:
    """
    Stub implementation of IFoodAnalysisProvider.

    Every image yields the same nutrition facts; chat echoes the question.
    Supports async context manager protocol for lifespan compatibility.
    """

    def __init__(self) -> None:
        self.image_calls = 0
        self.chat_calls = 0

    async def __aenter__(self) -> "StubFoodAnalysisProvider":
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        return None

    async def analyze_image(self, image_bytes: bytes, mime_type: str) -> FoodImageAnalysis:
        self.image_calls += 1
        raw_text = json.dumps(
            {
                "Calories": STUB_FACTS.calories,
                "Protein": STUB_FACTS.protein,
                "Fat": STUB_FACTS.fat,
                "Carbohydrates": STUB_FACTS.carbohydrates,
                "Healthiness": STUB_FACTS.healthiness.value if STUB_FACTS.healthiness else None,
            }
        )
        return FoodImageAnalysis(raw_text=raw_text, facts=STUB_FACTS, model=STUB_MODEL)

    async def chat(self, message: str) -> str:
        self.chat_calls += 1
        return f"[stub] You asked: {message}"
