"""
Intent models for request dispatch.

Defines intent categories and the structured classification result.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping


class IntentCategory(str, Enum):
    """Categories a user request can be classified into."""

    EMAIL = "email"
    CALENDAR = "calendar"
    PHONE = "phone"
    RESEARCH = "research"
    SOCIAL = "social"
    CLIENT_MANAGEMENT = "client_management"
    BUSINESS_INTELLIGENCE = "business_intelligence"
    PRODUCTIVITY = "productivity"
    PROMPTS = "prompts"
    CONTENT = "content"
    GENERAL = "general"


class BusinessUnit(str, Enum):
    """Which part of the business a request concerns."""

    AGENCY = "agency"
    AI = "ai"
    BOTH = "both"
    CLIENT = "client"


class Priority(str, Enum):
    """Urgency of a request."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


@dataclass(frozen=True)
class Intent:
    """Represents a classified user intent."""

    category: IntentCategory
    confidence: float
    action: str
    business: BusinessUnit = BusinessUnit.BOTH
    priority: Priority = Priority.MEDIUM

    def __post_init__(self):
        """Coerce string values to enums and validate confidence."""
        object.__setattr__(self, "category", IntentCategory(self.category))
        object.__setattr__(self, "business", BusinessUnit(self.business))
        object.__setattr__(self, "priority", Priority(self.priority))

        if isinstance(self.confidence, bool) or not isinstance(self.confidence, (int, float)):
            raise ValueError(f"Confidence must be a number, got {self.confidence!r}")
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Confidence must be within [0, 1], got {self.confidence}")
        object.__setattr__(self, "confidence", float(self.confidence))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Intent":
        """
        Build an intent from a classification payload.

        Only ``category`` is required; the remaining fields fall back to
        neutral defaults.

        Raises:
            KeyError: If ``category`` is missing.
            ValueError: If any field holds an unknown value.
        """
        return cls(
            category=data["category"],
            confidence=data.get("confidence", 0.5),
            action=str(data.get("action") or "unspecified"),
            business=data.get("business") or BusinessUnit.BOTH,
            priority=data.get("priority") or Priority.MEDIUM,
        )

    @classmethod
    def general_fallback(cls) -> "Intent":
        """Low-confidence intent used when remote classification fails."""
        return cls(
            category=IntentCategory.GENERAL,
            confidence=0.5,
            action="general_assistance",
            business=BusinessUnit.BOTH,
            priority=Priority.MEDIUM,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "category": self.category.value,
            "confidence": self.confidence,
            "action": self.action,
            "business": self.business.value,
            "priority": self.priority.value,
        }
