"""
Configuration loader and runtime configuration store.

Loads settings from environment variables layered over a .env file, and
exposes the per-service credential checks the dispatcher relies on.
"""

import logging
import os
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from dotenv import dotenv_values, set_key

from executive_assistant.models.configuration import (
    AppSettings,
    BusinessSettings,
    GmailSettings,
    OpenAISettings,
    OrchestrationSettings,
    PerplexitySettings,
    TwilioSettings,
    WhisprSettings,
    is_real_credential,
)

logger = logging.getLogger(__name__)

# service -> settings field -> environment variable
SERVICE_ENV_KEYS: Dict[str, Dict[str, str]] = {
    "openai": {
        "api_key": "OPENAI_API_KEY",
        "endpoint": "OPENAI_BASE_URL",
        "model": "OPENAI_MODEL",
    },
    "perplexity": {"api_key": "PERPLEXITY_API_KEY"},
    "twilio": {
        "account_sid": "TWILIO_ACCOUNT_SID",
        "auth_token": "TWILIO_AUTH_TOKEN",
        "phone_number": "TWILIO_PHONE_NUMBER",
    },
    "gmail": {
        "client_id": "GMAIL_CLIENT_ID",
        "client_secret": "GMAIL_CLIENT_SECRET",
        "refresh_token": "GMAIL_REFRESH_TOKEN",
    },
    "whispr": {"api_key": "WHISPR_API_KEY", "enabled": "WHISPR_ENABLED"},
}

# Field holding each service's primary credential.
PRIMARY_CREDENTIALS: Dict[str, str] = {
    "openai": "api_key",
    "perplexity": "api_key",
    "twilio": "auth_token",
    "gmail": "client_secret",
    "whispr": "api_key",
}

MIN_OPENAI_KEY_LENGTH = 10


def load_settings(env_file: Optional[str] = None) -> AppSettings:
    """
    Load application settings from environment variables.

    Process environment variables take precedence over values in the .env
    file. No variable is required; missing credentials leave the matching
    service unconfigured.

    Args:
        env_file: Optional path to .env file. If None, uses .env in the current directory.

    Returns:
        Complete application settings.

    Raises:
        ValueError: If a numeric variable cannot be parsed.
    """
    env_path = str(Path(env_file) if env_file else Path.cwd() / ".env")
    env = _read_environment(env_path)

    openai = OpenAISettings(
        api_key=env.get("OPENAI_API_KEY"),
        endpoint=env.get("OPENAI_BASE_URL", "https://api.openai.com/v1"),
        model=env.get("OPENAI_MODEL", "gpt-4"),
        timeout_seconds=float(env.get("OPENAI_TIMEOUT_SECONDS", "30"))
    )

    perplexity = PerplexitySettings(api_key=env.get("PERPLEXITY_API_KEY"))

    twilio = TwilioSettings(
        account_sid=env.get("TWILIO_ACCOUNT_SID"),
        auth_token=env.get("TWILIO_AUTH_TOKEN"),
        phone_number=env.get("TWILIO_PHONE_NUMBER")
    )

    gmail = GmailSettings(
        client_id=env.get("GMAIL_CLIENT_ID"),
        client_secret=env.get("GMAIL_CLIENT_SECRET"),
        refresh_token=env.get("GMAIL_REFRESH_TOKEN")
    )

    whispr = WhisprSettings(
        api_key=env.get("WHISPR_API_KEY"),
        enabled=_parse_bool(env.get("WHISPR_ENABLED", "false"))
    )

    business = BusinessSettings(
        owner_name=env.get("BUSINESS_OWNER_NAME", "the business owner"),
        agency_name=env.get("BUSINESS_AGENCY_NAME", "Molaison Agency"),
        ai_name=env.get("BUSINESS_AI_NAME", "Molaison AI")
    )

    orchestration = OrchestrationSettings(
        max_conversations=int(env.get("CONVERSATION_LOG_MAX_SIZE", "1000"))
    )

    return AppSettings(
        openai=openai,
        perplexity=perplexity,
        twilio=twilio,
        gmail=gmail,
        whispr=whispr,
        business=business,
        orchestration=orchestration,
        env_file=env_path,
        log_level=env.get("LOG_LEVEL", "INFO"),
        host=env.get("HOST", "0.0.0.0"),
        port=int(env.get("PORT", "3003"))
    )


def _read_environment(env_path: str) -> Dict[str, str]:
    """Merge .env file values with the process environment (process wins)."""
    values: Dict[str, str] = {}
    if os.path.exists(env_path):
        values.update({k: v for k, v in dotenv_values(env_path).items() if v is not None})
    values.update(os.environ)
    return values


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() == "true"


class ConfigurationStore:
    """
    Key/value view over the live application settings.

    Answers whether a service is configured and applies runtime credential
    updates, persisting them to the env file.
    """

    def __init__(self, settings: AppSettings):
        """
        Initialize the store.

        Args:
            settings: Live application settings. Updates are applied in place.
        """
        self._settings = settings

    @property
    def settings(self) -> AppSettings:
        """Get the live application settings."""
        return self._settings

    def is_configured(self, service_name: str) -> bool:
        """
        Check whether a service has usable credentials.

        Args:
            service_name: Service key, e.g. "openai" or "twilio".

        Returns:
            True if the service can be used. Unknown services are not configured.
        """
        s = self._settings
        if service_name == "openai":
            return s.openai.is_configured
        if service_name == "perplexity":
            return is_real_credential(s.perplexity.api_key)
        if service_name == "twilio":
            return bool(s.twilio.account_sid and s.twilio.auth_token)
        if service_name == "gmail":
            return bool(s.gmail.client_id and s.gmail.client_secret)
        if service_name == "whispr":
            return bool(s.whispr.api_key and s.whispr.enabled)
        return False

    def get_credential(self, service_name: str) -> Optional[str]:
        """
        Get the primary credential of a service.

        Args:
            service_name: Service key.

        Returns:
            Credential value, or None if unset.

        Raises:
            KeyError: If the service is unknown.
        """
        field_name = PRIMARY_CREDENTIALS[service_name]
        return getattr(getattr(self._settings, service_name), field_name)

    def status(self) -> Dict[str, Dict[str, Any]]:
        """Summarize connection status for every known service."""
        status: Dict[str, Dict[str, Any]] = {}
        for service_name in SERVICE_ENV_KEYS:
            configured = self.is_configured(service_name)
            status[service_name] = {
                "configured": configured,
                "status": "connected" if configured else "disconnected"
            }
        status["mcp"] = {"configured": True, "status": "available"}
        return status

    def update(self, service_name: str, values: Mapping[str, Any]) -> None:
        """
        Apply new settings for a service and persist them to the env file.

        Args:
            service_name: Service key.
            values: Settings field names mapped to new values. None values are skipped.

        Raises:
            ValueError: If the service or a field is unknown, or a value is invalid.
            OSError: If the env file cannot be written. Live settings are left unchanged.
        """
        if service_name not in SERVICE_ENV_KEYS:
            raise ValueError(f"Unknown service: {service_name}")

        env_keys = SERVICE_ENV_KEYS[service_name]
        updates = {name: value for name, value in values.items() if value is not None}

        unknown = set(updates) - set(env_keys)
        if unknown:
            raise ValueError(f"Unknown settings for {service_name}: {', '.join(sorted(unknown))}")
        if not updates:
            raise ValueError(f"No settings provided for {service_name}")

        if service_name == "openai" and "api_key" in updates:
            api_key = updates["api_key"]
            if not isinstance(api_key, str) or len(api_key) < MIN_OPENAI_KEY_LENGTH:
                raise ValueError("Invalid API key")

        if "enabled" in updates:
            updates["enabled"] = _parse_bool(updates["enabled"])

        # Live settings change only after every key is written.
        for name, value in updates.items():
            self._persist(env_keys[name], value)

        section = getattr(self._settings, service_name)
        setattr(self._settings, service_name, replace(section, **updates))

        logger.info(f"Updated {service_name} configuration: {', '.join(sorted(updates))}")

    def _persist(self, key: str, value: Any) -> None:
        """Write a single key to the env file, if one is configured."""
        if not self._settings.env_file:
            return

        if isinstance(value, bool):
            value = "true" if value else "false"

        path = Path(self._settings.env_file)
        path.touch(exist_ok=True)
        set_key(str(path), key, str(value))
