"""
Conversation record model.

One record is created for every successfully dispatched message.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from executive_assistant.models.intent import Intent


@dataclass(frozen=True)
class ConversationRecord:
    """Immutable history entry for a processed message."""

    message: str
    response: Any
    intent: Intent
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def business(self) -> str:
        """Business unit the record belongs to, derived from the intent."""
        return self.intent.business.value

    @classmethod
    def create(
        cls,
        message: str,
        response: Any,
        intent: Intent,
        timestamp: Optional[datetime] = None
    ) -> "ConversationRecord":
        """
        Create a record with a fresh identifier.

        Args:
            message: The user message that was dispatched.
            response: Raw capability output (text or structured payload).
            intent: Intent the message was classified as.
            timestamp: Time of dispatch. Defaults to now (UTC).

        Returns:
            New conversation record.
        """
        if timestamp is None:
            return cls(message=message, response=response, intent=intent)
        return cls(message=message, response=response, intent=intent, timestamp=timestamp)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "message": self.message,
            "response": self.response,
            "intent": self.intent.to_dict(),
            "timestamp": self.timestamp.isoformat(),
            "business": self.business,
        }
