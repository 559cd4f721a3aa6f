"""
Dispatcher for the executive assistant.

Runs the per-message flow: Intent Analysis → Capability Execution →
Response Normalization → Conversation Logging.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from executive_assistant.agent.capability_registry import CapabilityOutput, CapabilityRegistry
from executive_assistant.agent.response_normalizer import normalize_capability_output
from executive_assistant.config import ConfigurationStore
from executive_assistant.constants.assistant_messages import CAPABILITY_APOLOGY
from executive_assistant.errors import CapabilityExecutionError, DispatchFatalError
from executive_assistant.models.chat_response import ChatResponse
from executive_assistant.models.configuration import AppSettings
from executive_assistant.models.conversation import ConversationRecord
from executive_assistant.models.intent import Intent
from executive_assistant.plugins.agent_context import AgentContext
from executive_assistant.plugins.chat_completion import ChatCompletionGateway
from executive_assistant.plugins.intent_plugin import IntentPlugin
from executive_assistant.plugins.keyword_intent_classifier import KeywordIntentClassifier
from executive_assistant.state.conversation_log import ConversationLog


class AssistantDispatcher:
    """
    Routes user messages to capabilities.

    Every call to dispatch classifies the message, invokes the capability
    bound to the intent category, normalizes its output and records the
    exchange in the conversation log. Dispatch never raises; unexpected
    failures produce the failure envelope and leave the log untouched.
    """

    def __init__(
        self,
        settings: AppSettings,
        conversation_log: Optional[ConversationLog] = None,
        registry: Optional[CapabilityRegistry] = None,
        completion: Optional[ChatCompletionGateway] = None
    ):
        """
        Initialize the dispatcher.

        Args:
            settings: Application configuration.
            conversation_log: Log to record exchanges in. Defaults to a new
                log sized from the orchestration settings.
            registry: Capability registry. Defaults to the built-in plugins.
            completion: Completion gateway. Defaults to one built from the
                OpenAI settings.
        """
        self._settings = settings
        self._logger = logging.getLogger(__name__)
        self._config_store = ConfigurationStore(settings)
        if conversation_log is None:
            conversation_log = ConversationLog(settings.orchestration.max_conversations)
        self._conversation_log = conversation_log
        self._registry = registry or CapabilityRegistry()
        self._completion = completion or ChatCompletionGateway.from_settings(settings.openai)

        self._logger.info(
            f"Dispatcher initialized (classification="
            f"{'remote' if self._completion.is_configured else 'keyword'})"
        )

    @property
    def settings(self) -> AppSettings:
        """Get the application settings."""
        return self._settings

    @property
    def config_store(self) -> ConfigurationStore:
        """Get the configuration store over the live settings."""
        return self._config_store

    @property
    def conversation_log(self) -> ConversationLog:
        """Get the conversation log."""
        return self._conversation_log

    def reconfigure(self) -> None:
        """Rebuild the completion gateway after a configuration change."""
        self._completion = ChatCompletionGateway.from_settings(self._settings.openai)
        self._logger.info(
            f"Completion service reconfigured (configured={self._completion.is_configured})"
        )

    async def dispatch(
        self,
        message: Optional[str],
        context: Optional[Mapping[str, Any]] = None,
        business_context: Optional[str] = None
    ) -> ChatResponse:
        """
        Process one user message.

        Args:
            message: The user's message. None is treated as empty.
            context: Optional structured context from the caller.
            business_context: Optional business name used by content templates.

        Returns:
            Success envelope, or the failure envelope if processing failed.
        """
        message = message or ""
        request_id = str(uuid.uuid4())

        self._logger.info(f"Processing message [{request_id}]: {message}")

        try:
            agent_context = AgentContext(
                request_id=request_id,
                completion=self._completion,
                context=dict(context or {}),
                business_context=business_context or None,
                business=self._settings.business,
                logger=self._logger
            )

            # Step 1: Classify
            intent = await self._analyze_intent(agent_context, message)

            # Step 2: Dispatch to the capability
            output = await self._execute_capability(agent_context, intent, message)

            # Step 3: Normalize
            response_text, extras = normalize_capability_output(output)
            timestamp = datetime.now(timezone.utc)
            response = ChatResponse(
                success=True,
                response=response_text,
                intent=intent.category.value,
                timestamp=timestamp,
                **extras
            )

            # Step 4: Record
            await self._conversation_log.append(
                ConversationRecord.create(message, output, intent, timestamp)
            )

            self._logger.info(f"Response ready [{request_id}] intent={intent.category.value}")
            return response

        except Exception as ex:
            fatal = DispatchFatalError(f"Dispatch failed for request {request_id}: {ex}")
            self._logger.error(str(fatal), exc_info=True)
            return ChatResponse.failure()

    def _select_classifier(self, context: AgentContext):
        """Pick the remote classifier when the service is configured, keyword rules otherwise."""
        if context.completion.is_configured:
            return IntentPlugin(context)
        return KeywordIntentClassifier()

    async def _analyze_intent(self, context: AgentContext, message: str) -> Intent:
        """
        Classify the message.

        Args:
            context: Agent context for this request.
            message: The user's message.

        Returns:
            The classified intent.
        """
        classifier = self._select_classifier(context)
        intent = await classifier.classify(message, context.context)

        self._logger.info(
            f"Detected intent {intent.category.value} "
            f"(confidence={intent.confidence:.2f}, action={intent.action})"
        )
        return intent

    async def _execute_capability(
        self,
        context: AgentContext,
        intent: Intent,
        message: str
    ) -> CapabilityOutput:
        """
        Invoke the capability bound to the intent category.

        Capability failures are recovered here and replaced by an apology.

        Args:
            context: Agent context for this request.
            intent: Classified intent.
            message: The user's message.

        Returns:
            The capability output.
        """
        capability = self._registry.create(intent.category, context)

        try:
            return await capability.handle(intent, message)
        except Exception as e:
            error = CapabilityExecutionError(
                f"{type(capability).__name__} failed for intent {intent.category.value}: {e}"
            )
            self._logger.error(str(error), exc_info=True)
            return CAPABILITY_APOLOGY


def create_dispatcher(
    settings: AppSettings,
    conversation_log: Optional[ConversationLog] = None
) -> AssistantDispatcher:
    """
    Create and configure the dispatcher.

    This is the main entry point that should be used in main.py.

    Args:
        settings: Application configuration.
        conversation_log: Optional shared conversation log.

    Returns:
        Configured AssistantDispatcher instance.
    """
    return AssistantDispatcher(settings=settings, conversation_log=conversation_log)
