"""
Capability registry mapping intent categories to plugins.

Plugins are built per request from the agent context, so the registry holds
factories rather than instances.
"""

from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Protocol, Union

from executive_assistant.models.intent import Intent, IntentCategory
from executive_assistant.plugins.agent_context import AgentContext
from executive_assistant.plugins.business_plugins import (
    BusinessIntelligencePlugin,
    CalendarPlugin,
    ClientProjectPlugin,
    EmailPlugin,
    PhonePlugin,
    ProductivityPlugin,
    ResearchPlugin,
    SocialMediaPlugin,
)
from executive_assistant.plugins.content_plugin import ContentPlugin
from executive_assistant.plugins.general_plugin import GeneralPlugin

CapabilityOutput = Union[str, Mapping[str, Any]]


class Capability(Protocol):
    """Contract shared by every capability plugin."""

    async def handle(self, intent: Intent, message: str) -> CapabilityOutput:
        ...


CapabilityFactory = Callable[[AgentContext], Capability]

DEFAULT_CAPABILITIES: Mapping[IntentCategory, CapabilityFactory] = MappingProxyType({
    IntentCategory.EMAIL: EmailPlugin,
    IntentCategory.CALENDAR: CalendarPlugin,
    IntentCategory.PHONE: PhonePlugin,
    IntentCategory.RESEARCH: ResearchPlugin,
    IntentCategory.SOCIAL: SocialMediaPlugin,
    IntentCategory.CLIENT_MANAGEMENT: ClientProjectPlugin,
    IntentCategory.BUSINESS_INTELLIGENCE: BusinessIntelligencePlugin,
    IntentCategory.PRODUCTIVITY: ProductivityPlugin,
    IntentCategory.PROMPTS: ContentPlugin,
    IntentCategory.CONTENT: ContentPlugin,
    IntentCategory.GENERAL: GeneralPlugin,
})


class CapabilityRegistry:
    """Lookup table from intent category to capability factory."""

    def __init__(
        self,
        capabilities: Optional[Mapping[IntentCategory, CapabilityFactory]] = None,
        default: CapabilityFactory = GeneralPlugin
    ):
        """
        Initialize the registry.

        Args:
            capabilities: Category to factory mapping. Defaults to the built-in plugins.
            default: Factory used for categories without a registered capability.
        """
        source = DEFAULT_CAPABILITIES if capabilities is None else capabilities
        self._capabilities: Dict[IntentCategory, CapabilityFactory] = dict(source)
        self._default = default

    def resolve(self, category: IntentCategory) -> CapabilityFactory:
        """Get the factory for a category, falling back to the default capability."""
        return self._capabilities.get(category, self._default)

    def create(self, category: IntentCategory, context: AgentContext) -> Capability:
        """Build the capability for a category with the given request context."""
        return self.resolve(category)(context)

    def categories(self) -> Mapping[IntentCategory, CapabilityFactory]:
        """Return a read-only view of the registered capabilities."""
        return MappingProxyType(self._capabilities)
