"""REST endpoints backed by the hosted nutrition model: photo check and chat."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from api.dependencies import get_container
from api.schemas import ChatRequest, ChatResponse, CheckFoodResponse, NutritionFactsResponse
from application.food_analysis.commands.analyze_food_image import AnalyzeFoodImageCommand
from application.food_analysis.commands.send_chat_message import SendChatMessageCommand
from domain.food_analysis.core.exceptions.domain_errors import (
    EmptyMessageError,
    FoodAnalysisError,
    InvalidImageError,
)
from infrastructure.container import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["food"])


@router.post("/check-food", response_model=CheckFoodResponse)
async def check_food(
    image: Optional[UploadFile] = File(None, description="Food photo (multipart field 'image')"),
    container: AppContainer = Depends(get_container),
) -> CheckFoodResponse:
    """Estimate nutrition facts for a food photo.

    ``result`` is the model answer as text (the app shows it directly);
    ``analysis`` is the parsed JSON, or null when the answer holds none.

    Example:
        ```bash
        curl -X POST http://localhost:8080/check-food -F "image=@meal.jpg"
        ```
    """
    if image is None:
        raise HTTPException(status_code=400, detail="No image uploaded")

    logger.info(
        "Food check request",
        extra={"file_name": image.filename, "content_type": image.content_type},
    )
    content = await image.read()

    command = AnalyzeFoodImageCommand(
        image_bytes=content,
        mime_type=image.content_type,
        filename=image.filename,
    )
    try:
        analysis = await container.analyze_image.handle(command)
    except InvalidImageError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
    except FoodAnalysisError as e:
        logger.error("Food check failed", extra={"error": str(e)})
        raise HTTPException(status_code=502, detail="Error analyzing image")

    return CheckFoodResponse(
        result=analysis.raw_text,
        analysis=NutritionFactsResponse.from_entity(analysis.facts) if analysis.facts else None,
    )


@router.post("/chat", response_model=ChatResponse)
async def chat(
    body: ChatRequest,
    container: AppContainer = Depends(get_container),
) -> ChatResponse:
    try:
        reply = await container.send_chat.handle(SendChatMessageCommand(message=body.message))
    except EmptyMessageError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except FoodAnalysisError as e:
        logger.error("Chat failed", extra={"error": str(e)})
        raise HTTPException(status_code=502, detail="Error processing chat message")

    return ChatResponse(reply=reply)
