"""REST endpoints for nutrition targets, saved plans, and user settings.

Paths follow the ones the mobile app already calls.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_container
from api.schemas import (
    CalculateNutritionRequest,
    CalculateNutritionResponse,
    NutritionRecordResponse,
    SaveNutritionRequest,
    SaveNutritionResponse,
    UserSettingsRequest,
    UserSettingsResponse,
)
from application.nutrition_log.commands.save_record import SaveNutritionRecordCommand
from application.nutrition_log.commands.save_user_settings import SaveUserSettingsCommand
from application.nutrition_log.queries.get_latest_settings import GetLatestUserSettingsQuery
from application.nutrition_log.queries.list_records import ListNutritionRecordsQuery
from application.nutrition_targets.queries.compute_targets import ComputeTargetsQuery
from domain.nutrition_log.core.exceptions.domain_errors import (
    InvalidNutritionRecordError,
    UserSettingsNotFoundError,
)
from domain.nutrition_targets.core.exceptions.domain_errors import InvalidProfileError
from infrastructure.container import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["nutrition"])


@router.post("/calculate-nutrition", response_model=CalculateNutritionResponse)
async def calculate_nutrition(
    body: CalculateNutritionRequest,
    breakdown: bool = Query(False, description="Include unrounded intermediate figures"),
    container: AppContainer = Depends(get_container),
) -> CalculateNutritionResponse:
    """Compute daily calories and macros for a profile.

    Example:
        ```bash
        curl -X POST http://localhost:8080/calculate-nutrition \\
          -H 'Content-Type: application/json' \\
          -d '{"gender": "Male", "age": 25, "height": 180, "weight": 80,
               "trainsPerWeek": 3, "activity": "Normal", "goal": "Maintain"}'
        ```

        Response:
        ```json
        {"calories": 2798, "protein": 210, "fat": 93, "carbs": 280, "warnings": []}
        ```
    """
    query = ComputeTargetsQuery(
        gender=body.gender,
        age=body.age,
        height=body.height,
        weight=body.weight,
        activity=body.activity,
        goal=body.goal,
        trains_per_week=body.trains_per_week,
    )
    try:
        result = container.compute_targets.handle(query)
    except InvalidProfileError as e:
        logger.info(
            "Rejected profile",
            extra={"field": e.field, "value": repr(e.value), "reason": str(e)},
        )
        raise HTTPException(status_code=400, detail=str(e))

    return CalculateNutritionResponse.from_result(result, include_breakdown=breakdown)


@router.post("/save-nutrition", response_model=SaveNutritionResponse)
async def save_nutrition(
    body: SaveNutritionRequest,
    container: AppContainer = Depends(get_container),
) -> SaveNutritionResponse:
    command = SaveNutritionRecordCommand(
        age=body.age,
        height=body.height,
        weight=body.weight,
        calories=body.calories,
        protein=body.protein,
        fat=body.fat,
        carbs=body.carbs,
        gender=body.gender,
        trains_per_week=body.trains_per_week,
        activity=body.activity,
        goal=body.goal,
        note=body.note,
        date=body.date,
        user_id=body.user_id,
    )
    try:
        record = await container.save_record.handle(command)
    except InvalidNutritionRecordError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return SaveNutritionResponse(data=NutritionRecordResponse.from_entity(record))


@router.get("/get-nutrition", response_model=List[NutritionRecordResponse])
async def get_nutrition(
    user_id: Optional[str] = Query(None, alias="userId"),
    limit: Optional[int] = Query(None, ge=1),
    container: AppContainer = Depends(get_container),
) -> List[NutritionRecordResponse]:
    """Saved plans, newest first."""
    records = await container.list_records.handle(
        ListNutritionRecordsQuery(user_id=user_id, limit=limit)
    )
    return [NutritionRecordResponse.from_entity(r) for r in records]


@router.post("/user-settings", response_model=UserSettingsResponse)
async def save_user_settings(
    body: UserSettingsRequest,
    container: AppContainer = Depends(get_container),
) -> UserSettingsResponse:
    """Save a settings snapshot; targets are computed when not supplied."""
    command = SaveUserSettingsCommand(
        gender=body.gender,
        age=body.age,
        height=body.height,
        weight=body.weight,
        trains_per_week=body.trains_per_week,
        activity=body.activity,
        goal=body.goal,
        calories=body.calories,
        protein=body.protein,
        fat=body.fat,
        carbs=body.carbs,
        user_id=body.user_id,
    )
    try:
        settings = await container.save_settings.handle(command)
    except InvalidProfileError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return UserSettingsResponse.from_entity(settings)


@router.get("/user-settings/latest", response_model=UserSettingsResponse)
async def latest_user_settings(
    user_id: Optional[str] = Query(None, alias="userId"),
    container: AppContainer = Depends(get_container),
) -> UserSettingsResponse:
    try:
        settings = await container.latest_settings.handle(
            GetLatestUserSettingsQuery(user_id=user_id)
        )
    except UserSettingsNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return UserSettingsResponse.from_entity(settings)
