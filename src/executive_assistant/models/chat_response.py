"""
Chat response envelope returned by the dispatcher.

Represents both the success shape and the failure shape of a dispatch.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from executive_assistant.constants.assistant_messages import (
    DISPATCH_ERROR,
    DISPATCH_FALLBACK,
)


@dataclass
class ChatResponse:
    """Uniform response envelope for a dispatched message."""

    success: bool
    response: Optional[str] = None
    intent: Optional[str] = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    prompts: Optional[List[str]] = None
    calendar: Optional[List[Dict[str, Any]]] = None
    caption: Optional[str] = None
    error: Optional[str] = None
    fallback: Optional[str] = None

    @classmethod
    def failure(cls, error: str = DISPATCH_ERROR) -> "ChatResponse":
        """Build the failure envelope with the generic user-facing fallback."""
        return cls(success=False, error=error, fallback=DISPATCH_FALLBACK)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for serialization.

        Unset optional fields are omitted. The failure envelope carries no
        timestamp.
        """
        if not self.success:
            return {"success": False, "error": self.error, "fallback": self.fallback}

        result: Dict[str, Any] = {"success": True, "response": self.response}
        for name in ("prompts", "calendar", "caption"):
            value = getattr(self, name)
            if value is not None:
                result[name] = value
        result["intent"] = self.intent
        result["timestamp"] = self.timestamp.isoformat()
        return result
