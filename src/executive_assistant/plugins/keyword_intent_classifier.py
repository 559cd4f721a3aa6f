"""
Offline keyword-based intent classification.

Used whenever the remote classifier is not configured. The rule order is a
fixed contract: the first matching rule wins, so "schedule a call" is a
calendar request, not a phone request.
"""

from typing import Any, Mapping, Optional, Sequence, Tuple

from executive_assistant.models.intent import (
    BusinessUnit,
    Intent,
    IntentCategory,
    Priority,
)

KEYWORD_MATCH_CONFIDENCE = 0.7
NO_MATCH_CONFIDENCE = 0.6

# (keywords, category, action), checked in order.
KEYWORD_RULES: Sequence[Tuple[Tuple[str, ...], IntentCategory, str]] = (
    (("email",), IntentCategory.EMAIL, "email_management"),
    (("calendar", "schedule"), IntentCategory.CALENDAR, "calendar_management"),
    (("call", "phone"), IntentCategory.PHONE, "phone_assistance"),
    (("research", "analyze"), IntentCategory.RESEARCH, "research_task"),
    (("social", "content"), IntentCategory.SOCIAL, "social_media"),
    (("client", "project"), IntentCategory.CLIENT_MANAGEMENT, "client_assistance"),
    (("prompt", "generate"), IntentCategory.PROMPTS, "prompt_generation"),
    (("productive", "goal"), IntentCategory.PRODUCTIVITY, "productivity_coaching"),
)


def classify_by_keywords(message: Optional[str]) -> Intent:
    """
    Classify a message by case-insensitive keyword search.

    Never raises; a message matching no rule (including an empty one) is
    classified as general.

    Args:
        message: User message.

    Returns:
        Classified intent.
    """
    lowered = (message or "").lower()

    for keywords, category, action in KEYWORD_RULES:
        if any(keyword in lowered for keyword in keywords):
            return Intent(
                category=category,
                confidence=KEYWORD_MATCH_CONFIDENCE,
                action=action,
                business=BusinessUnit.BOTH,
                priority=Priority.MEDIUM
            )

    return Intent(
        category=IntentCategory.GENERAL,
        confidence=NO_MATCH_CONFIDENCE,
        action="general_assistance",
        business=BusinessUnit.BOTH,
        priority=Priority.MEDIUM
    )


class KeywordIntentClassifier:
    """Intent classifier backed by the keyword rules."""

    async def classify(
        self,
        message: str,
        context: Optional[Mapping[str, Any]] = None
    ) -> Intent:
        """Classify a message. The context is not used by keyword rules."""
        return classify_by_keywords(message)
