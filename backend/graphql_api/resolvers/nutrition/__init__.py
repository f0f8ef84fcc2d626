"""Nutrition GraphQL resolvers."""

from graphql_api.resolvers.nutrition.mutations import NutritionMutations
from graphql_api.resolvers.nutrition.queries import NutritionQueries

__all__ = [
    "NutritionMutations",
    "NutritionQueries",
]
