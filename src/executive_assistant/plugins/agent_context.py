"""
Agent context for passing request state and dependencies to plugins.

Provides plugins with the caller's context, the business profile, the
completion gateway and logging.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional
import logging

from executive_assistant.models.configuration import BusinessSettings
from executive_assistant.plugins.chat_completion import ChatCompletionGateway


@dataclass
class AgentContext:
    """
    Context object passed to plugins during execution.

    A fresh context is built for every dispatched message.
    """

    request_id: str
    completion: ChatCompletionGateway
    context: Dict[str, Any] = field(default_factory=dict)
    business_context: Optional[str] = None
    business: BusinessSettings = field(default_factory=BusinessSettings)
    logger: Optional[logging.Logger] = None

    def __post_init__(self):
        """Initialize logger if not provided."""
        if self.logger is None:
            self.logger = logging.getLogger(__name__)
