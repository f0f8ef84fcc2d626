"""OpenRouter client - implements IFoodAnalysisProvider port.

OpenRouter exposes an OpenAI-compatible API, so the official ``openai`` SDK
is used with a custom ``base_url``.

Key Features:
- Food photo analysis (base64 data URL, JSON-only prompt)
- Nutrition chat
- Circuit breaker (5 failures -> 60s timeout)
- Retry logic (exponential backoff)
- Lenient parsing of the model's JSON answer
"""

# mypy: warn-unused-ignores=False

import base64
import json
import logging
import re
import time
from typing import Any, Dict, List, Optional

from circuitbreaker import circuit
from openai import APIError, AsyncOpenAI
from pydantic import ValidationError
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from domain.food_analysis.core.entities.food_analysis import (
    FoodImageAnalysis,
    NutritionFacts,
)
from domain.food_analysis.core.exceptions.domain_errors import FoodAnalysisError
from infrastructure.ai.openrouter.models import NutritionFactsResponse
from infrastructure.ai.prompts.food_analysis import (
    CHAT_SYSTEM_PROMPT,
    FOOD_ANALYSIS_SYSTEM_PROMPT,
    FOOD_ANALYSIS_USER_PROMPT,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
DEFAULT_MODEL = "openai/gpt-4o-mini"

_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)
_OBJECT_RE = re.compile(r"\{.*?\}", re.DOTALL)


def parse_nutrition_facts(text: str) -> Optional[NutritionFacts]:
    """Extract nutrition facts from a model answer.

    Accepts bare JSON, JSON wrapped in markdown fences, and JSON embedded
    in prose. Returns None when no valid object is found.
    """
    if not text:
        return None
    cleaned = _FENCE_RE.sub("", text).strip()
    for candidate in _OBJECT_RE.findall(cleaned):
        try:
            payload = json.loads(candidate)
            return NutritionFactsResponse.model_validate(payload).to_domain()
        except (json.JSONDecodeError, ValidationError, ValueError) as e:
            logger.debug(
                "Discarding unparseable JSON candidate",
                extra={"candidate": candidate[:200], "error": str(e)},
            )
    return None


def to_data_url(image_bytes: bytes, mime_type: str) -> str:
    encoded = base64.b64encode(image_bytes).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


class OpenRouterClient:
    """
    OpenRouter client implementing IFoodAnalysisProvider port.

    Example:
        >>> async with OpenRouterClient(api_key="sk-or-...") as client:
        ...     analysis = await client.analyze_image(data, "image/jpeg")
        ...     print(analysis.facts)
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        model: str = DEFAULT_MODEL,
        chat_model: Optional[str] = None,
        temperature: float = 0.1,
        timeout: float = 60.0,
    ):
        """
        Initialize OpenRouter client.

        Args:
            api_key: OpenRouter API key
            base_url: OpenAI-compatible endpoint
            model: Vision model for photo analysis
            chat_model: Model for chat (defaults to ``model``)
            temperature: Sampling temperature (low for consistent numbers)
            timeout: Request timeout in seconds
        """
        if not api_key:
            raise ValueError("OpenRouter API key is required")
        self._client = AsyncOpenAI(api_key=api_key, base_url=base_url, timeout=timeout)
        self._model = model
        self._chat_model = chat_model or model
        self._temperature = temperature

    @property
    def model(self) -> str:
        return self._model

    @property
    def chat_model(self) -> str:
        return self._chat_model

    async def __aenter__(self) -> "OpenRouterClient":
        return self

    async def __aexit__(self, exc_type: object, exc: object, tb: object) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.close()
        logger.info("OpenRouter client closed")

    async def analyze_image(self, image_bytes: bytes, mime_type: str) -> FoodImageAnalysis:
        """
        Analyze a food photo.

        Args:
            image_bytes: Raw image content
            mime_type: Image MIME type

        Returns:
            FoodImageAnalysis with the raw answer and parsed facts (None if
            the answer holds no valid JSON object)

        Raises:
            FoodAnalysisError: If the API call fails after retries
        """
        start_time = time.time()
        logger.info(
            "Analyzing food image",
            extra={"model": self._model, "mime_type": mime_type, "size_bytes": len(image_bytes)},
        )

        messages: List[Dict[str, Any]] = [
            {"role": "system", "content": FOOD_ANALYSIS_SYSTEM_PROMPT},
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": FOOD_ANALYSIS_USER_PROMPT},
                    {
                        "type": "image_url",
                        "image_url": {"url": to_data_url(image_bytes, mime_type)},
                    },
                ],
            },
        ]

        try:
            raw_text = await self._vision_completion(messages)
        except FoodAnalysisError:
            raise
        except Exception as e:
            logger.error(
                "Food image analysis failed",
                extra={"model": self._model, "error": str(e)},
            )
            raise FoodAnalysisError("Error analyzing image") from e

        facts = parse_nutrition_facts(raw_text)
        processing_time_ms = int((time.time() - start_time) * 1000)
        logger.info(
            "Food image analysis complete",
            extra={
                "is_food": facts is not None,
                "processing_time_ms": processing_time_ms,
            },
        )
        return FoodImageAnalysis(raw_text=raw_text, facts=facts, model=self._model)

    async def chat(self, message: str) -> str:
        """
        Answer a nutrition question.

        Raises:
            FoodAnalysisError: If the API call fails after retries
        """
        logger.info(
            "Sending chat message",
            extra={"model": self._chat_model, "message_length": len(message)},
        )
        messages: List[Dict[str, Any]] = [
            {"role": "system", "content": CHAT_SYSTEM_PROMPT},
            {"role": "user", "content": message},
        ]
        try:
            return await self._chat_completion(messages)
        except FoodAnalysisError:
            raise
        except Exception as e:
            logger.error(
                "Chat completion failed",
                extra={"model": self._chat_model, "error": str(e)},
            )
            raise FoodAnalysisError("Error processing chat message") from e

    @circuit(failure_threshold=5, recovery_timeout=60, name="openrouter_vision")  # type: ignore[misc]
    @retry(  # type: ignore[misc]
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type((TimeoutError, ConnectionError, APIError)),
    )
    async def _vision_completion(self, messages: List[Dict[str, Any]]) -> str:
        return await self._completion(self._model, messages)

    @circuit(failure_threshold=5, recovery_timeout=60, name="openrouter_chat")  # type: ignore[misc]
    @retry(  # type: ignore[misc]
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type((TimeoutError, ConnectionError, APIError)),
    )
    async def _chat_completion(self, messages: List[Dict[str, Any]]) -> str:
        return await self._completion(self._chat_model, messages)

    async def _completion(self, model: str, messages: List[Dict[str, Any]]) -> str:
        response = await self._client.chat.completions.create(
            model=model,
            messages=messages,  # type: ignore[arg-type]
            temperature=self._temperature,
        )

        usage = response.usage
        if usage:
            logger.info(
                "OpenRouter response received",
                extra={
                    "model": model,
                    "total_tokens": usage.total_tokens,
                    "prompt_tokens": usage.prompt_tokens,
                    "completion_tokens": usage.completion_tokens,
                },
            )

        if not response.choices:
            raise FoodAnalysisError("Model returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise FoodAnalysisError("Model returned an empty answer")
        return content.strip()
