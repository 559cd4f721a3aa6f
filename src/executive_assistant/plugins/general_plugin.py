"""
General assistance plugin.

Handles every request no other capability claims, using the text-generation
service when it is configured.
"""

import json
import logging

from executive_assistant.constants.assistant_messages import GENERAL_COMPLETION_APOLOGY
from executive_assistant.errors import CompletionError
from executive_assistant.models.intent import Intent
from executive_assistant.plugins.agent_context import AgentContext

GENERAL_MAX_TOKENS = 500
GENERAL_TEMPERATURE = 0.7


class GeneralPlugin:
    """
    Plugin for general requests.

    Answers with a generated response when the completion service is
    configured, and with an explanatory message otherwise.
    """

    def __init__(self, context: AgentContext):
        """
        Initialize the general plugin.

        Args:
            context: Agent context with request state and dependencies.
        """
        self._context = context
        self._completion = context.completion
        self._logger = context.logger or logging.getLogger(__name__)

    async def handle(self, intent: Intent, message: str) -> str:
        """
        Answer a general request.

        Args:
            intent: Classified intent.
            message: The user's message.

        Returns:
            The answer text.
        """
        business = self._context.business

        if not self._completion.is_configured:
            return (
                f'I understand you need assistance with: "{message}". As your executive '
                f"assistant for {business.agency_name} and {business.ai_name}, I'm ready to "
                "help with business management, client projects, and various tasks. However, "
                "advanced AI features require API configuration. Please let me know what "
                "specific assistance you need!"
            )

        self._logger.info(f"Answering general request: {message}")

        prompt = f"""You are an AI Executive Assistant for {business.owner_name}, who runs:

1. **{business.agency_name}**: Insurance and business services company
2. **{business.ai_name}**: AI tools and SEO platform company
3. **Custom Client Projects**: Builds solutions for other businesses

Your role is to be professional, efficient, and helpful. Provide clear, actionable responses.

User request: "{message}"
Context: {json.dumps(self._context.context, default=str)}

Respond as a professional executive assistant would, offering specific help and next steps."""

        try:
            answer = await self._completion.complete(
                prompt,
                max_tokens=GENERAL_MAX_TOKENS,
                temperature=GENERAL_TEMPERATURE
            )
        except CompletionError as e:
            self._logger.error(f"General request error: {e}")
            return GENERAL_COMPLETION_APOLOGY

        self._logger.info(f"Generated answer of length {len(answer)}")
        return answer
