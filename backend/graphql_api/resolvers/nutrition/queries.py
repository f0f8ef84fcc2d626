"""Query resolvers for nutrition targets and saved plans.

- targets: compute daily calories and macros for a profile
- records: saved plans, newest first
- record: one saved plan by id
"""

from typing import List, Optional
from uuid import UUID
import strawberry

from application.nutrition_log.queries.get_record import GetNutritionRecordQuery
from application.nutrition_log.queries.list_records import ListNutritionRecordsQuery
from application.nutrition_targets.queries.compute_targets import ComputeTargetsQuery
from graphql_api.resolvers.nutrition.mappers import (
    map_record_to_graphql,
    map_targets_result_to_graphql,
)
from graphql_api.types_nutrition import (
    NutritionRecordType,
    NutritionTargetsInput,
    NutritionTargetsType,
)


@strawberry.type
class NutritionQueries:
    """Queries for nutrition targets."""

    @strawberry.field
    def targets(
        self, info: strawberry.types.Info, input: NutritionTargetsInput
    ) -> NutritionTargetsType:
        """Compute daily targets.

        Example:
            query {
              nutrition {
                targets(input: {
                  gender: "Male", age: 25, height: 180, weight: 80
                  activity: "Normal", goal: "Maintain"
                }) {
                  calories protein fat carbs warnings
                  breakdown { bmr tdee adjustedCalories }
                }
              }
            }

        Raises:
            InvalidProfileError: Reported as a GraphQL error
        """
        handler = info.context.get("compute_targets")
        if handler is None:
            raise Exception("Missing dependencies in GraphQL context")

        result = handler.handle(
            ComputeTargetsQuery(
                gender=input.gender,
                age=input.age,
                height=input.height,
                weight=input.weight,
                activity=input.activity,
                goal=input.goal,
                trains_per_week=input.trains_per_week,
            )
        )
        return map_targets_result_to_graphql(result)

    @strawberry.field
    async def records(
        self,
        info: strawberry.types.Info,
        user_id: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[NutritionRecordType]:
        handler = info.context.get("list_records")
        if handler is None:
            raise Exception("Missing dependencies in GraphQL context")

        records = await handler.handle(ListNutritionRecordsQuery(user_id=user_id, limit=limit))
        return [map_record_to_graphql(r) for r in records]

    @strawberry.field
    async def record(self, info: strawberry.types.Info, id: str) -> Optional[NutritionRecordType]:
        """Saved plan by id; null for unknown or malformed ids."""
        handler = info.context.get("get_record")
        if handler is None:
            raise Exception("Missing dependencies in GraphQL context")

        try:
            record_id = UUID(id)
        except ValueError:
            return None

        found = await handler.handle(GetNutritionRecordQuery(record_id=record_id))
        return map_record_to_graphql(found) if found is not None else None
