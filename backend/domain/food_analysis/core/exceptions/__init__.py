"""Domain exceptions for food analysis."""

from .domain_errors import EmptyMessageError, FoodAnalysisError, InvalidImageError

__all__ = ["FoodAnalysisError", "InvalidImageError", "EmptyMessageError"]
