"""Unit tests for OpenRouter client.

Tests focus on:
- Client initialization
- Request payload (data URL, prompts, models)
- Mapping answers to FoodImageAnalysis
- Error handling

Note: These are UNIT tests with mocked API calls. The circuit breakers are
shared per process, so each circuit sees fewer failures here than its
threshold.
"""

import base64

import pytest
from unittest.mock import AsyncMock, MagicMock, patch
from typing import Any, Iterator

from domain.food_analysis.core.entities import Healthiness
from domain.food_analysis.core.exceptions import FoodAnalysisError
from infrastructure.ai.openrouter.client import (
    DEFAULT_BASE_URL,
    OpenRouterClient,
    to_data_url,
)
from infrastructure.ai.prompts import CHAT_SYSTEM_PROMPT, FOOD_ANALYSIS_SYSTEM_PROMPT


def _response(content: Any, with_usage: bool = True) -> Any:
    mock_response = MagicMock()
    mock_response.choices = [MagicMock(message=MagicMock(content=content))]
    mock_response.usage = (
        MagicMock(total_tokens=900, prompt_tokens=800, completion_tokens=100)
        if with_usage
        else None
    )
    return mock_response


@pytest.fixture
def mock_openai_client() -> Iterator[Any]:
    """Patch AsyncOpenAI where the client module looks it up."""
    with patch("infrastructure.ai.openrouter.client.AsyncOpenAI") as mock:
        instance = mock.return_value
        instance.chat.completions.create = AsyncMock()
        instance.close = AsyncMock()
        yield mock


@pytest.fixture
def client(mock_openai_client: Any) -> OpenRouterClient:
    return OpenRouterClient(api_key="sk-or-test-key", model="vision-model", chat_model="chat-model")


def _create_mock(mock_openai_client: Any) -> AsyncMock:
    return mock_openai_client.return_value.chat.completions.create


class TestOpenRouterClientInit:
    def test_defaults(self, mock_openai_client) -> None:
        client = OpenRouterClient(api_key="sk-or-test-key")

        assert client.model == "openai/gpt-4o-mini"
        assert client.chat_model == "openai/gpt-4o-mini"
        mock_openai_client.assert_called_once_with(
            api_key="sk-or-test-key", base_url=DEFAULT_BASE_URL, timeout=60.0
        )

    def test_custom_models(self, client) -> None:
        assert client.model == "vision-model"
        assert client.chat_model == "chat-model"

    def test_requires_api_key(self, mock_openai_client) -> None:
        with pytest.raises(ValueError, match="API key is required"):
            OpenRouterClient(api_key="")

    @pytest.mark.asyncio
    async def test_context_manager_closes_session(self, mock_openai_client) -> None:
        async with OpenRouterClient(api_key="sk-or-test-key") as client:
            assert isinstance(client, OpenRouterClient)

        mock_openai_client.return_value.close.assert_awaited_once()


def test_to_data_url() -> None:
    url = to_data_url(b"\x89PNG", "image/png")

    assert url == "data:image/png;base64," + base64.b64encode(b"\x89PNG").decode()


class TestAnalyzeImage:
    """Test analyze_image."""

    @pytest.mark.asyncio
    async def test_parses_json_answer(self, client, mock_openai_client) -> None:
        answer = '{"Calories": 450, "Protein": 25, "Fat": 12, "Carbohydrates": 60, "Healthiness": "Healthy"}'
        _create_mock(mock_openai_client).return_value = _response(answer)

        analysis = await client.analyze_image(b"image-bytes", "image/jpeg")

        assert analysis.raw_text == answer
        assert analysis.model == "vision-model"
        assert analysis.is_food
        assert analysis.facts.calories == 450
        assert analysis.facts.healthiness is Healthiness.HEALTHY

    @pytest.mark.asyncio
    async def test_request_payload(self, client, mock_openai_client) -> None:
        create = _create_mock(mock_openai_client)
        create.return_value = _response("{}", with_usage=False)

        await client.analyze_image(b"abc", "image/webp")

        kwargs = create.await_args.kwargs
        assert kwargs["model"] == "vision-model"
        assert kwargs["temperature"] == 0.1
        system, user = kwargs["messages"]
        assert system == {"role": "system", "content": FOOD_ANALYSIS_SYSTEM_PROMPT}
        image_part = user["content"][1]
        assert image_part["type"] == "image_url"
        assert image_part["image_url"]["url"] == to_data_url(b"abc", "image/webp")

    @pytest.mark.asyncio
    async def test_non_food_answer_keeps_text(self, client, mock_openai_client) -> None:
        _create_mock(mock_openai_client).return_value = _response("  Food not detected.  ")

        analysis = await client.analyze_image(b"image-bytes", "image/jpeg")

        assert analysis.raw_text == "Food not detected."
        assert analysis.facts is None
        assert not analysis.is_food

    @pytest.mark.asyncio
    async def test_api_failure_wrapped(self, client, mock_openai_client) -> None:
        _create_mock(mock_openai_client).side_effect = RuntimeError("boom")

        with pytest.raises(FoodAnalysisError, match="Error analyzing image") as exc_info:
            await client.analyze_image(b"image-bytes", "image/jpeg")

        assert isinstance(exc_info.value.__cause__, RuntimeError)

    @pytest.mark.asyncio
    async def test_empty_answer(self, client, mock_openai_client) -> None:
        _create_mock(mock_openai_client).return_value = _response(None)

        with pytest.raises(FoodAnalysisError, match="empty answer"):
            await client.analyze_image(b"image-bytes", "image/jpeg")


class TestChat:
    @pytest.mark.asyncio
    async def test_chat_reply(self, client, mock_openai_client) -> None:
        create = _create_mock(mock_openai_client)
        create.return_value = _response("Oats are a good source of fiber.\n")

        reply = await client.chat("Are oats healthy?")

        assert reply == "Oats are a good source of fiber."
        kwargs = create.await_args.kwargs
        assert kwargs["model"] == "chat-model"
        assert kwargs["messages"] == [
            {"role": "system", "content": CHAT_SYSTEM_PROMPT},
            {"role": "user", "content": "Are oats healthy?"},
        ]

    @pytest.mark.asyncio
    async def test_chat_failure_wrapped(self, client, mock_openai_client) -> None:
        _create_mock(mock_openai_client).side_effect = RuntimeError("boom")

        with pytest.raises(FoodAnalysisError, match="Error processing chat message"):
            await client.chat("hello")
