"""
Pytest configuration and fixtures for tests.
"""

import pytest
import logging
from unittest.mock import AsyncMock, Mock

from executive_assistant.models.configuration import (
    AppSettings,
    OpenAISettings,
    OrchestrationSettings,
    PLACEHOLDER_API_KEY,
)
from executive_assistant.plugins.agent_context import AgentContext
from executive_assistant.plugins.chat_completion import ChatCompletionGateway
from executive_assistant.state.conversation_log import ConversationLog


@pytest.fixture
def test_settings() -> AppSettings:
    """
    Create test application settings with no usable completion credential.

    Returns:
        Test configuration.
    """
    return AppSettings(
        openai=OpenAISettings(
            api_key=PLACEHOLDER_API_KEY,
            endpoint="https://test.openai.example/v1",
            model="gpt-4",
            timeout_seconds=5
        ),
        orchestration=OrchestrationSettings(max_conversations=1000),
        env_file=None,
        log_level="INFO"
    )


@pytest.fixture
def unconfigured_completion() -> Mock:
    """
    Create a completion gateway mock that reports no configuration.

    Returns:
        Mock gateway whose complete method must never be awaited.
    """
    gateway = Mock(spec=ChatCompletionGateway)
    gateway.is_configured = False
    gateway.complete = AsyncMock(side_effect=AssertionError("completion must not be called"))
    return gateway


@pytest.fixture
def mock_completion() -> Mock:
    """
    Create a configured completion gateway mock.

    Returns:
        Mock gateway; set ``complete.return_value`` or ``complete.side_effect`` per test.
    """
    gateway = Mock(spec=ChatCompletionGateway)
    gateway.is_configured = True
    gateway.complete = AsyncMock(return_value="")
    return gateway


@pytest.fixture
def mock_context(unconfigured_completion) -> AgentContext:
    """
    Create agent context for testing.

    Returns:
        Agent context backed by an unconfigured completion gateway.
    """
    return AgentContext(
        request_id="test-request-id",
        completion=unconfigured_completion,
        context={},
        logger=logging.getLogger("test")
    )


@pytest.fixture
def configured_context(mock_completion) -> AgentContext:
    """
    Create agent context whose completion gateway is configured.

    Returns:
        Agent context backed by ``mock_completion``.
    """
    return AgentContext(
        request_id="test-request-id",
        completion=mock_completion,
        context={"source": "test"},
        logger=logging.getLogger("test")
    )


@pytest.fixture
def conversation_log() -> ConversationLog:
    """
    Create an empty conversation log.

    Returns:
        Conversation log with the default capacity.
    """
    return ConversationLog()
