"""
User-facing message constants shared across the pipeline.
"""

DISPATCH_ERROR = "Failed to process message"

DISPATCH_FALLBACK = (
    "I'm having trouble processing that request. "
    "Could you please rephrase or try again?"
)

CAPABILITY_APOLOGY = (
    "I ran into a problem handling that request. "
    "Please try again in a moment."
)

GENERAL_COMPLETION_APOLOGY = (
    "I understand you need assistance. Let me help you with that. "
    "Could you provide more specific details about what you'd like me to handle?"
)

CONTENT_CLARIFICATION = (
    "I can help you with AI prompt generation, content calendars, and viral captions. "
    "What specific type of content would you like me to create?"
)

DEFAULT_BUSINESS_CONTEXT = "your business"
DEFAULT_SERVICES_CONTEXT = "your services"
