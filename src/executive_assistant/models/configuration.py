"""
Configuration models for the assistant application.

Uses dataclasses so settings can be updated in place at runtime.
"""

from dataclasses import dataclass, field
from typing import Optional

# Sentinel credential shipped in sample env files; treated as "not configured".
PLACEHOLDER_API_KEY = "test_key_placeholder"


def is_real_credential(value: Optional[str]) -> bool:
    """Check that a credential is present and is not the placeholder sentinel."""
    return bool(value) and value != PLACEHOLDER_API_KEY


@dataclass
class OpenAISettings:
    """Text-generation service configuration."""

    api_key: Optional[str] = None
    endpoint: str = "https://api.openai.com/v1"
    model: str = "gpt-4"
    timeout_seconds: float = 30.0

    @property
    def is_configured(self) -> bool:
        """Whether remote classification and completion are enabled."""
        return is_real_credential(self.api_key)


@dataclass
class PerplexitySettings:
    """Research service configuration."""

    api_key: Optional[str] = None
    base_url: str = "https://api.perplexity.ai"


@dataclass
class TwilioSettings:
    """Phone transport configuration."""

    account_sid: Optional[str] = None
    auth_token: Optional[str] = None
    phone_number: Optional[str] = None


@dataclass
class GmailSettings:
    """Mail integration configuration."""

    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    refresh_token: Optional[str] = None


@dataclass
class WhisprSettings:
    """Voice transcription configuration."""

    api_key: Optional[str] = None
    enabled: bool = False


@dataclass
class BusinessSettings:
    """Names used when capabilities describe the businesses they serve."""

    owner_name: str = "the business owner"
    agency_name: str = "Molaison Agency"
    ai_name: str = "Molaison AI"


@dataclass
class OrchestrationSettings:
    """Dispatch behavior configuration."""

    max_conversations: int = 1000


@dataclass
class AppSettings:
    """Complete application configuration."""

    openai: OpenAISettings = field(default_factory=OpenAISettings)
    perplexity: PerplexitySettings = field(default_factory=PerplexitySettings)
    twilio: TwilioSettings = field(default_factory=TwilioSettings)
    gmail: GmailSettings = field(default_factory=GmailSettings)
    whispr: WhisprSettings = field(default_factory=WhisprSettings)
    business: BusinessSettings = field(default_factory=BusinessSettings)
    orchestration: OrchestrationSettings = field(default_factory=OrchestrationSettings)
    env_file: Optional[str] = None
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3003
