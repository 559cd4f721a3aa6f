"""
Tests for data models.
"""

import pytest
from datetime import datetime, timezone

from executive_assistant.constants.assistant_messages import DISPATCH_FALLBACK
from executive_assistant.models.chat_response import ChatResponse
from executive_assistant.models.conversation import ConversationRecord
from executive_assistant.models.intent import BusinessUnit, Intent, IntentCategory, Priority


class TestIntent:
    """Tests for Intent model."""

    def test_intent_creation(self):
        """Test creating an intent."""
        intent = Intent(
            category=IntentCategory.EMAIL,
            confidence=0.95,
            action="email_management",
            business=BusinessUnit.AGENCY,
            priority=Priority.HIGH
        )

        assert intent.category == IntentCategory.EMAIL
        assert intent.confidence == 0.95
        assert intent.action == "email_management"
        assert intent.business == BusinessUnit.AGENCY
        assert intent.priority == Priority.HIGH

    def test_intent_string_conversion(self):
        """Test creating intent from string values."""
        intent = Intent(category="calendar", confidence=1, action="x", business="ai", priority="urgent")

        assert intent.category == IntentCategory.CALENDAR
        assert intent.business == BusinessUnit.AI
        assert intent.priority == Priority.URGENT
        assert isinstance(intent.confidence, float)

    def test_intent_defaults(self):
        """Test business and priority defaults."""
        intent = Intent(category="general", confidence=0.5, action="x")

        assert intent.business == BusinessUnit.BOTH
        assert intent.priority == Priority.MEDIUM

    @pytest.mark.parametrize("confidence", [-0.1, 1.5, "0.8", None, True])
    def test_intent_rejects_invalid_confidence(self, confidence):
        """Test confidence must be a number within [0, 1]."""
        with pytest.raises(ValueError):
            Intent(category="general", confidence=confidence, action="x")

    def test_intent_rejects_unknown_category(self):
        """Test unknown categories are rejected."""
        with pytest.raises(ValueError):
            Intent(category="weather", confidence=0.5, action="x")

    def test_from_dict_applies_defaults(self):
        """Test only category is required when parsing a payload."""
        intent = Intent.from_dict({"category": "research"})

        assert intent.category == IntentCategory.RESEARCH
        assert intent.confidence == 0.5
        assert intent.action == "unspecified"
        assert intent.business == BusinessUnit.BOTH
        assert intent.priority == Priority.MEDIUM

    def test_from_dict_requires_category(self):
        """Test a payload without category is rejected."""
        with pytest.raises(KeyError):
            Intent.from_dict({"confidence": 0.9})

    def test_general_fallback(self):
        """Test the synthetic fallback intent."""
        assert Intent.general_fallback().to_dict() == {
            "category": "general",
            "confidence": 0.5,
            "action": "general_assistance",
            "business": "both",
            "priority": "medium",
        }

    def test_prompts_and_content_are_distinct_values(self):
        """Test both spellings of the content category exist."""
        assert IntentCategory("prompts") == IntentCategory.PROMPTS
        assert IntentCategory("content") == IntentCategory.CONTENT


class TestConversationRecord:
    """Tests for ConversationRecord model."""

    def test_business_derived_from_intent(self):
        """Test business comes from the intent."""
        intent = Intent(category="email", confidence=0.7, action="x", business="client")
        record = ConversationRecord.create("hello", "hi", intent)

        assert record.business == "client"
        assert record.to_dict()["business"] == "client"

    def test_records_get_unique_ids(self):
        """Test every record has its own identifier."""
        intent = Intent.general_fallback()
        first = ConversationRecord.create("a", "b", intent)
        second = ConversationRecord.create("a", "b", intent)

        assert first.id != second.id

    def test_explicit_timestamp(self):
        """Test a given timestamp is kept."""
        timestamp = datetime(2026, 1, 2, tzinfo=timezone.utc)
        record = ConversationRecord.create("a", {"response": "b"}, Intent.general_fallback(), timestamp)

        assert record.timestamp == timestamp
        assert record.to_dict()["timestamp"] == "2026-01-02T00:00:00+00:00"
        assert record.to_dict()["response"] == {"response": "b"}


class TestChatResponse:
    """Tests for ChatResponse envelope."""

    def test_success_omits_unset_fields(self):
        """Test unset side fields are not serialized."""
        response = ChatResponse(success=True, response="Hello", intent="general")
        data = response.to_dict()

        assert data["success"] is True
        assert data["response"] == "Hello"
        assert data["intent"] == "general"
        assert "timestamp" in data
        assert "prompts" not in data
        assert "calendar" not in data
        assert "caption" not in data
        assert "error" not in data

    def test_success_includes_side_fields(self):
        """Test side fields are serialized when present."""
        response = ChatResponse(success=True, response="Here", intent="prompts", prompts=["a", "b"])

        assert response.to_dict()["prompts"] == ["a", "b"]

    def test_failure_envelope(self):
        """Test the failure envelope shape."""
        data = ChatResponse.failure().to_dict()

        assert data == {
            "success": False,
            "error": "Failed to process message",
            "fallback": DISPATCH_FALLBACK,
        }
