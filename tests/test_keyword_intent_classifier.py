"""
Tests for keyword-based intent classification.
"""

import pytest

from executive_assistant.models.intent import BusinessUnit, IntentCategory, Priority
from executive_assistant.plugins.keyword_intent_classifier import (
    KeywordIntentClassifier,
    classify_by_keywords,
)


class TestClassifyByKeywords:
    """Tests for classify_by_keywords."""

    @pytest.mark.parametrize("message", [
        "Check my email",
        "EMAIL the client about the project",
        "Can you draft an Email to schedule a call?",
    ])
    def test_email_wins(self, message):
        """Test email outranks every other keyword."""
        intent = classify_by_keywords(message)

        assert intent.category == IntentCategory.EMAIL
        assert intent.confidence == 0.7
        assert intent.action == "email_management"

    @pytest.mark.parametrize("message, category, action", [
        ("Open my calendar", IntentCategory.CALENDAR, "calendar_management"),
        ("I need to schedule a call", IntentCategory.CALENDAR, "calendar_management"),
        ("Call the insurance office", IntentCategory.PHONE, "phone_assistance"),
        ("What's their phone number", IntentCategory.PHONE, "phone_assistance"),
        ("Research our competitors", IntentCategory.RESEARCH, "research_task"),
        ("Analyze last quarter", IntentCategory.RESEARCH, "research_task"),
        ("Post on social", IntentCategory.SOCIAL, "social_media"),
        ("generate a content calendar", IntentCategory.CALENDAR, "calendar_management"),
        ("Write some content", IntentCategory.SOCIAL, "social_media"),
        ("New client onboarding", IntentCategory.CLIENT_MANAGEMENT, "client_assistance"),
        ("Status of the project", IntentCategory.CLIENT_MANAGEMENT, "client_assistance"),
        ("Write an image prompt", IntentCategory.PROMPTS, "prompt_generation"),
        ("Generate ideas", IntentCategory.PROMPTS, "prompt_generation"),
        ("Help me be more productive", IntentCategory.PRODUCTIVITY, "productivity_coaching"),
        ("Set a goal for Q3", IntentCategory.PRODUCTIVITY, "productivity_coaching"),
    ])
    def test_keyword_precedence(self, message, category, action):
        """Test first matching rule wins."""
        intent = classify_by_keywords(message)

        assert intent.category == category
        assert intent.action == action
        assert intent.confidence == 0.7
        assert intent.business == BusinessUnit.BOTH
        assert intent.priority == Priority.MEDIUM

    @pytest.mark.parametrize("message", ["", None, "Hello there", "What's the weather?"])
    def test_no_match_is_general(self, message):
        """Test messages matching no keyword classify as general."""
        intent = classify_by_keywords(message)

        assert intent.category == IntentCategory.GENERAL
        assert intent.confidence == 0.6
        assert intent.action == "general_assistance"
        assert intent.business == BusinessUnit.BOTH
        assert intent.priority == Priority.MEDIUM

    def test_deterministic(self):
        """Test repeated classification yields equal intents."""
        assert classify_by_keywords("schedule a call") == classify_by_keywords("schedule a call")


class TestKeywordIntentClassifier:
    """Tests for the async classifier wrapper."""

    @pytest.mark.asyncio
    async def test_classify_ignores_context(self):
        """Test context does not change keyword classification."""
        classifier = KeywordIntentClassifier()

        intent = await classifier.classify("Call Bob", {"category": "email"})

        assert intent.category == IntentCategory.PHONE
