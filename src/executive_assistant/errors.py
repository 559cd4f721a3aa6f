"""
Exception types for the dispatch pipeline.

Every error here is recovered somewhere inside the pipeline; none of them
escapes AssistantDispatcher.dispatch.
"""


class AssistantError(Exception):
    """Base error for the executive assistant."""


class CompletionError(AssistantError):
    """Raised when the text-generation service fails or returns nothing usable."""


class ClassificationError(AssistantError):
    """Base error for remote intent classification failures."""


class ClassificationTransportError(ClassificationError):
    """Raised when the classification request could not be completed."""


class ClassificationParseError(ClassificationError):
    """Raised when the classification reply is not a valid intent payload."""


class CapabilityExecutionError(AssistantError):
    """Raised when a capability fails while handling a request."""


class DispatchFatalError(AssistantError):
    """Raised when a dispatch fails outside of any local recovery."""
