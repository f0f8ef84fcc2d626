"""Mutation resolvers for saved nutrition plans."""

import strawberry

from application.nutrition_log.commands.save_record import SaveNutritionRecordCommand
from graphql_api.resolvers.nutrition.mappers import map_record_to_graphql
from graphql_api.types_nutrition import NutritionRecordType, SaveNutritionRecordInput


@strawberry.type
class NutritionMutations:
    """Mutations for nutrition plans."""

    @strawberry.mutation
    async def save_record(
        self, info: strawberry.types.Info, input: SaveNutritionRecordInput
    ) -> NutritionRecordType:
        """Save a nutrition plan.

        Example:
            mutation {
              nutrition {
                saveRecord(input: {
                  age: 25, height: 180, weight: 80
                  calories: 2798, protein: 210, fat: 93, carbs: 280
                  userId: "user123"
                }) { id date calories }
              }
            }

        Raises:
            InvalidNutritionRecordError: Reported as a GraphQL error when
                age/height/weight/calories are missing
        """
        handler = info.context.get("save_record")
        if handler is None:
            raise Exception("Missing dependencies in GraphQL context")

        record = await handler.handle(
            SaveNutritionRecordCommand(
                age=input.age,
                height=input.height,
                weight=input.weight,
                calories=input.calories,
                protein=input.protein,
                fat=input.fat,
                carbs=input.carbs,
                gender=input.gender,
                trains_per_week=input.trains_per_week,
                activity=input.activity,
                goal=input.goal,
                note=input.note,
                date=input.date,
                user_id=input.user_id,
            )
        )
        return map_record_to_graphql(record)
