"""SendChatMessageCommand - forward a question to the nutrition chat."""

from dataclasses import dataclass

from domain.food_analysis.core.exceptions.domain_errors import EmptyMessageError
from domain.food_analysis.core.ports.analysis_provider import IFoodAnalysisProvider

MAX_MESSAGE_CHARS = 4000


@dataclass(frozen=True)
class SendChatMessageCommand:
    message: str


class SendChatMessageHandler:
    """Strip and bound the message, then ask the provider."""

    def __init__(self, provider: IFoodAnalysisProvider):
        self._provider = provider

    async def handle(self, command: SendChatMessageCommand) -> str:
        """
        Raises:
            EmptyMessageError: If the message is blank
            FoodAnalysisError: If the provider call fails
        """
        message = (command.message or "").strip()
        if not message:
            raise EmptyMessageError()
        return await self._provider.chat(message[:MAX_MESSAGE_CHARS])
