"""GraphQL schema for the nutrition backend.

Usage:
    from graphql_api.schema import create_schema
    schema = create_schema()
"""

import datetime

import strawberry

from graphql_api.resolvers.nutrition import NutritionMutations, NutritionQueries


@strawberry.type
class Query:
    @strawberry.field
    def server_time(self) -> str:
        return datetime.datetime.now(datetime.timezone.utc).isoformat()

    @strawberry.field
    def health(self) -> str:
        return "ok"

    @strawberry.field(description="Nutrition targets and saved plans")  # type: ignore[misc]
    def nutrition(self) -> NutritionQueries:
        return NutritionQueries()


@strawberry.type
class Mutation:
    @strawberry.field(description="Nutrition plan mutations")  # type: ignore[misc]
    def nutrition(self) -> NutritionMutations:
        return NutritionMutations()


def create_schema() -> strawberry.Schema:
    return strawberry.Schema(query=Query, mutation=Mutation)
