"""Domain -> GraphQL type mapping for the nutrition resolvers."""

from application.nutrition_targets.queries.compute_targets import ComputeTargetsResult
from domain.nutrition_log.core.entities.nutrition_record import NutritionRecord
from graphql_api.types_nutrition import (
    ActivityLevelEnum,
    EnergyBreakdownType,
    GenderEnum,
    GoalEnum,
    NutritionRecordType,
    NutritionTargetsType,
    ResolvedProfileType,
)


def map_targets_result_to_graphql(result: ComputeTargetsResult) -> NutritionTargetsType:
    profile = result.profile
    breakdown = result.breakdown
    targets = result.targets

    return NutritionTargetsType(
        calories=targets.calories,
        protein=targets.protein,
        fat=targets.fat,
        carbs=targets.carbs,
        macro_calories=targets.macro_calories(),
        warnings=list(result.warnings),
        breakdown=EnergyBreakdownType(
            bmr=breakdown.bmr,
            activity_multiplier=breakdown.activity_multiplier,
            tdee=breakdown.tdee,
            goal_offset=breakdown.goal_offset,
            adjusted_calories=breakdown.adjusted_calories,
        ),
        profile=ResolvedProfileType(
            # Domain and GraphQL enums share values
            gender=GenderEnum(profile.gender.value),
            age=profile.age,
            height=profile.height,
            weight=profile.weight,
            trains_per_week=profile.trains_per_week,
            activity_level=ActivityLevelEnum(profile.activity_level.value),
            goal=GoalEnum(profile.goal.value),
            defaulted_fields=list(profile.defaulted_fields),
        ),
    )


def map_record_to_graphql(record: NutritionRecord) -> NutritionRecordType:
    return NutritionRecordType(
        id=str(record.record_id),
        user_id=record.user_id,
        date=record.date,
        gender=record.gender,
        age=record.age,
        height=record.height,
        weight=record.weight,
        trains_per_week=record.trains_per_week,
        activity=record.activity,
        goal=record.goal,
        calories=record.calories,
        protein=record.protein,
        fat=record.fat,
        carbs=record.carbs,
        note=record.note,
        created_at=record.created_at,
    )
