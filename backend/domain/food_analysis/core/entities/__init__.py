"""Entities for food analysis domain."""

from .food_analysis import FoodImageAnalysis, Healthiness, NutritionFacts

__all__ = ["FoodImageAnalysis", "NutritionFacts", "Healthiness"]
