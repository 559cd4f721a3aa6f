"""
Intent classification plugin for request dispatch.

Uses the text-generation service to classify a user message into one intent.
"""

import json
import re
from typing import Annotated, Any, Dict, Mapping, Optional

from semantic_kernel.functions import kernel_function

from executive_assistant.errors import (
    ClassificationError,
    ClassificationParseError,
    ClassificationTransportError,
    CompletionError,
)
from executive_assistant.models.intent import Intent
from executive_assistant.plugins.agent_context import AgentContext

CLASSIFICATION_MAX_TOKENS = 300
CLASSIFICATION_TEMPERATURE = 0.3


class IntentPlugin:
    """
    Plugin for analyzing user intent.

    Asks the text-generation service for a single JSON intent. Classification
    never raises: transport and parse failures degrade to a low-confidence
    general intent. Callers choose keyword rules instead when the service is
    not configured.
    """

    def __init__(self, context: AgentContext):
        """
        Initialize the intent plugin.

        Args:
            context: Agent context with request state and dependencies.
        """
        self._context = context
        self._completion = context.completion
        self._logger = context.logger

    async def classify(
        self,
        message: str,
        context: Optional[Mapping[str, Any]] = None
    ) -> Intent:
        """
        Classify a user message into an intent.

        Args:
            message: The user's message.
            context: Optional structured context from the caller.

        Returns:
            Classified intent, or the general fallback when the remote call
            or its parsing fails.
        """
        try:
            response = await self.analyze_intent(message, context)
            intent = self.parse_intent_response(response)
        except ClassificationError as e:
            self._logger.error(f"Intent analysis error: {e}")
            return Intent.general_fallback()

        self._logger.info(
            f"Classified message as {intent.category.value} "
            f"(confidence={intent.confidence:.2f})"
        )
        return intent

    @kernel_function(
        name="AnalyzeIntent",
        description="Classifies a user message into a single intent category"
    )
    async def analyze_intent(
        self,
        message: Annotated[str, "The user message to classify"],
        context: Annotated[Optional[Dict[str, Any]], "Structured context from the caller"] = None
    ) -> Annotated[str, "JSON object describing the intent"]:
        """
        Request a classification from the text-generation service.

        Args:
            message: The user's message.
            context: Optional structured context.

        Returns:
            Raw JSON text with markdown fences removed.

        Raises:
            ClassificationTransportError: If the service call fails.
        """
        prompt = self.build_prompt(message, context)

        try:
            response = await self._completion.complete(
                prompt,
                max_tokens=CLASSIFICATION_MAX_TOKENS,
                temperature=CLASSIFICATION_TEMPERATURE
            )
        except CompletionError as e:
            raise ClassificationTransportError(str(e)) from e

        return self._extract_json(response)

    def build_prompt(self, message: str, context: Optional[Mapping[str, Any]] = None) -> str:
        """Build the classification instruction for a message."""
        business = self._context.business
        context_json = json.dumps(dict(context or {}), default=str)

        return f"""Analyze this message to determine the user's intent for business management:

Message: "{message}"
Context: {context_json}

Business Context:
- {business.agency_name}: Insurance & Business Services
- {business.ai_name}: AI Tools & SEO Platform
- Also builds custom solutions for clients

Categorize the intent as exactly one of:
- email (email management, responses)
- calendar (scheduling, reservations, appointments)
- phone (making calls, client outreach)
- research (business intelligence, competitive analysis)
- social (social media management, content)
- client_management (client projects, custom builds)
- business_intelligence (business analysis, metrics)
- productivity (life coaching, goal setting, optimization)
- prompts (AI prompt generation, content creation)
- content (content calendar, viral captions)
- general (other requests)

Respond with ONLY a JSON object, no other text:
{{
  "category": "category_name",
  "confidence": 0.8,
  "action": "specific_action_to_take",
  "business": "agency|ai|both|client",
  "priority": "low|medium|high|urgent"
}}"""

    def parse_intent_response(self, json_response: str) -> Intent:
        """
        Parse a classification reply into an Intent.

        Args:
            json_response: JSON text returned by analyze_intent.

        Returns:
            Parsed intent.

        Raises:
            ClassificationParseError: If the reply is not a valid intent object.
        """
        try:
            data = json.loads(json_response)
        except json.JSONDecodeError as e:
            raise ClassificationParseError(f"Failed to parse intent JSON: {e}") from e

        if not isinstance(data, dict):
            raise ClassificationParseError("Intent response is not a JSON object")

        try:
            return Intent.from_dict(data)
        except KeyError as e:
            raise ClassificationParseError(f"Intent response is missing {e}") from e
        except (TypeError, ValueError) as e:
            raise ClassificationParseError(f"Invalid intent response {data}: {e}") from e

    @staticmethod
    def _extract_json(response: str) -> str:
        """
        Extract JSON from response, handling markdown code blocks.

        Args:
            response: Raw response string that may contain markdown.

        Returns:
            Cleaned JSON string.
        """
        if "```json" in response:
            match = re.search(r"```json\s*(.*?)\s*```", response, re.DOTALL)
            if match:
                return match.group(1).strip()
        elif "```" in response:
            match = re.search(r"```\s*(.*?)\s*```", response, re.DOTALL)
            if match:
                return match.group(1).strip()

        return response.strip()
