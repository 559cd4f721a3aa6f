"""
Normalization of capability outputs into envelope fields.
"""

import logging
from typing import Any, Dict, Mapping, Tuple

logger = logging.getLogger(__name__)

# Structured payload fields passed through to the response envelope.
SIDE_FIELDS = ("prompts", "calendar", "caption")


def normalize_capability_output(output: Any) -> Tuple[str, Dict[str, Any]]:
    """
    Flatten a capability output into response text and side fields.

    Args:
        output: Plain text, or a mapping with a ``response`` field and
            optional side fields.

    Returns:
        Tuple of (response text, side fields present and non-empty in the payload).
    """
    if output is None:
        return "", {}

    if isinstance(output, str):
        return output, {}

    if isinstance(output, Mapping):
        response = output.get("response")
        if response is None:
            logger.warning("Structured capability output has no response field")
            response = ""
        extras = {name: output[name] for name in SIDE_FIELDS if output.get(name)}
        return str(response), extras

    return str(output), {}
