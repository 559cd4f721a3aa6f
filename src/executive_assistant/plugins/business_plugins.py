"""
Business capability plugins.

Each plugin handles one intent category. The underlying integrations (mail,
phone transport, research service) are not wired up; the plugins answer with
a short description of what they can do and ask for the missing details.
"""

import logging

from executive_assistant.models.intent import Intent
from executive_assistant.plugins.agent_context import AgentContext


class EmailPlugin:
    """Plugin for email management requests."""

    def __init__(self, context: AgentContext):
        self._context = context
        self._logger = context.logger or logging.getLogger(__name__)

    async def handle(self, intent: Intent, message: str) -> str:
        self._logger.info(f"Email request ({intent.action}): {message}")
        business = self._context.business
        return (
            f"I'll help you manage your emails for both {business.agency_name} and "
            f"{business.ai_name}. What specific email task would you like me to handle?"
        )


class CalendarPlugin:
    """Plugin for scheduling, reservation and appointment requests."""

    def __init__(self, context: AgentContext):
        self._context = context
        self._logger = context.logger or logging.getLogger(__name__)

    async def handle(self, intent: Intent, message: str) -> str:
        self._logger.info(f"Calendar request ({intent.action}): {message}")
        return (
            "I can help you schedule appointments, make reservations, and manage your "
            "calendar across both businesses. What would you like me to schedule?"
        )


class PhonePlugin:
    """Plugin for outbound call requests."""

    def __init__(self, context: AgentContext):
        self._context = context
        self._logger = context.logger or logging.getLogger(__name__)

    async def handle(self, intent: Intent, message: str) -> str:
        self._logger.info(f"Phone request ({intent.action}): {message}")
        return (
            "I can make calls on your behalf for client outreach, follow-ups, or "
            "business development. Who would you like me to call?"
        )


class ResearchPlugin:
    """Plugin for research and competitive analysis requests."""

    def __init__(self, context: AgentContext):
        self._context = context
        self._logger = context.logger or logging.getLogger(__name__)

    async def handle(self, intent: Intent, message: str) -> str:
        self._logger.info(f"Research request ({intent.action}): {message}")
        return (
            "I'll conduct comprehensive research using Perplexity AI. What topic or "
            "competitor would you like me to research?"
        )


class SocialMediaPlugin:
    """Plugin for social media management requests."""

    def __init__(self, context: AgentContext):
        self._context = context
        self._logger = context.logger or logging.getLogger(__name__)

    async def handle(self, intent: Intent, message: str) -> str:
        self._logger.info(f"Social media request ({intent.action}): {message}")
        return (
            "I'll manage social media for both your brands. Would you like me to create "
            "content, schedule posts, or analyze engagement?"
        )


class ClientProjectPlugin:
    """Plugin for client project and custom build requests."""

    def __init__(self, context: AgentContext):
        self._context = context
        self._logger = context.logger or logging.getLogger(__name__)

    async def handle(self, intent: Intent, message: str) -> str:
        self._logger.info(f"Client project request ({intent.action}): {message}")
        return (
            "I'll help manage your client projects and custom builds. What project "
            "updates or new client work do you need help with?"
        )


class BusinessIntelligencePlugin:
    """
    Plugin for business analysis and metrics requests.

    Receives the caller's business context through the agent context.
    """

    def __init__(self, context: AgentContext):
        self._context = context
        self._logger = context.logger or logging.getLogger(__name__)

    async def handle(self, intent: Intent, message: str) -> str:
        business = self._context.business
        if self._context.business_context:
            self._logger.info(f"Business context: {self._context.business_context}")
        return (
            f"I'll analyze business performance for both {business.agency_name} and "
            f"{business.ai_name}. What metrics or insights do you need?"
        )


class ProductivityPlugin:
    """Plugin for life coaching, goal setting and time management requests."""

    def __init__(self, context: AgentContext):
        self._context = context
        self._logger = context.logger or logging.getLogger(__name__)

    async def handle(self, intent: Intent, message: str) -> str:
        self._logger.info(f"Productivity request ({intent.action}): {message}")
        business = self._context.business
        return (
            "As your productivity coach, I can help you optimize your time, set goals, "
            f"and balance running both {business.agency_name} and {business.ai_name}. "
            "What area would you like to focus on?"
        )
