"""
Chat completion gateway over Semantic Kernel.

All calls to the external text-generation service go through this module:
intent classification and free-text general answers alike.
"""

import asyncio
import logging
from typing import Optional

from openai import AsyncOpenAI
from semantic_kernel import Kernel
from semantic_kernel.connectors.ai.chat_completion_client_base import ChatCompletionClientBase
from semantic_kernel.connectors.ai.open_ai import (
    OpenAIChatCompletion,
    OpenAIChatPromptExecutionSettings,
)
from semantic_kernel.contents import ChatHistory

from executive_assistant.errors import CompletionError
from executive_assistant.models.configuration import OpenAISettings

SERVICE_ID = "openai"


def create_kernel(settings: OpenAISettings) -> Optional[Kernel]:
    """
    Create a Semantic Kernel instance with the OpenAI chat completion service.

    Args:
        settings: Text-generation service configuration.

    Returns:
        Configured Kernel, or None when no usable credential is set.
    """
    if not settings.is_configured:
        return None

    client = AsyncOpenAI(
        api_key=settings.api_key,
        base_url=settings.endpoint,
        timeout=settings.timeout_seconds,
        max_retries=0
    )

    kernel = Kernel()
    kernel.add_service(
        OpenAIChatCompletion(
            service_id=SERVICE_ID,
            ai_model_id=settings.model,
            api_key=settings.api_key,
            async_client=client
        )
    )
    return kernel


class ChatCompletionGateway:
    """
    Single-prompt access to the text-generation service.

    Each prompt is sent as one user message. Calls are bounded by the
    configured timeout and every failure surfaces as CompletionError.
    """

    def __init__(self, kernel: Optional[Kernel], settings: OpenAISettings):
        """
        Initialize the gateway.

        Args:
            kernel: Kernel holding the chat completion service, or None when unconfigured.
            settings: Text-generation service configuration.
        """
        self._kernel = kernel
        self._settings = settings
        self._logger = logging.getLogger(__name__)

    @classmethod
    def from_settings(cls, settings: OpenAISettings) -> "ChatCompletionGateway":
        """Build a gateway and its kernel from settings."""
        return cls(create_kernel(settings), settings)

    @property
    def is_configured(self) -> bool:
        """Whether the service can be called."""
        return self._kernel is not None and self._settings.is_configured

    async def complete(self, prompt: str, max_tokens: int, temperature: float) -> str:
        """
        Send a prompt and return the generated text.

        Args:
            prompt: Full prompt text, sent as a single user message.
            max_tokens: Upper bound on generated tokens.
            temperature: Sampling temperature.

        Returns:
            Generated text.

        Raises:
            CompletionError: If the service is unconfigured, fails, times out
                or returns no content.
        """
        if not self.is_configured:
            raise CompletionError("Completion service is not configured")

        service = self._kernel.get_service(SERVICE_ID, type=ChatCompletionClientBase)

        history = ChatHistory()
        history.add_user_message(prompt)
        execution_settings = OpenAIChatPromptExecutionSettings(
            max_tokens=max_tokens,
            temperature=temperature
        )

        try:
            async with asyncio.timeout(self._settings.timeout_seconds):
                result = await service.get_chat_message_content(
                    chat_history=history,
                    settings=execution_settings
                )
        except TimeoutError as e:
            raise CompletionError(
                f"Completion timed out after {self._settings.timeout_seconds} seconds"
            ) from e
        except Exception as e:
            raise CompletionError(f"Completion request failed: {e}") from e

        content = result.content if result is not None else None
        if not content:
            raise CompletionError("Completion returned no content")

        self._logger.debug(f"Completion returned {len(content)} characters")
        return str(content)
