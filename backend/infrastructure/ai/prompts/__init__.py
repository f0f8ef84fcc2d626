"""Prompts for the hosted nutrition model."""

from infrastructure.ai.prompts.food_analysis import (
    CHAT_SYSTEM_PROMPT,
    FOOD_ANALYSIS_SYSTEM_PROMPT,
    FOOD_ANALYSIS_USER_PROMPT,
)

__all__ = [
    "CHAT_SYSTEM_PROMPT",
    "FOOD_ANALYSIS_SYSTEM_PROMPT",
    "FOOD_ANALYSIS_USER_PROMPT",
]
