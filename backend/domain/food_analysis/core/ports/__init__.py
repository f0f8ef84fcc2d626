"""Ports for food analysis domain."""

from .analysis_provider import IFoodAnalysisProvider

__all__ = ["IFoodAnalysisProvider"]
