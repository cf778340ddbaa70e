# =============================================================================
# core/payload.py  —  Payload Builder
# =============================================================================
#
# Turns validated tool arguments into the CallRequest sent to the API.
#
#   number         ← input, whitespace-trimmed
#   prompt         ← input if non-empty, else DEFAULT_PROMPT
#   first_message  ← input if non-empty, else DEFAULT_FIRST_MESSAGE
#
# build_call_request() is pure: same input, same (equal) output, no I/O.
# =============================================================================

from typing import Any, Mapping, Optional

from core.models import CallRequest
from core.prompts import DEFAULT_FIRST_MESSAGE, DEFAULT_PROMPT
from core.validation import require_number


def _or_default(value: Optional[Any], default: str) -> str:
    if value is None:
        return default
    text = str(value)
    return text if text.strip() else default


def build_call_request(
    number: str,
    prompt: Optional[str] = None,
    first_message: Optional[str] = None,
) -> CallRequest:
    """Build a CallRequest, filling in the default texts where needed.

    Args:
        number: Phone number to dial.  Must already be known non-empty;
                it's trimmed here.
        prompt: Voice-agent instructions, or None/"" for the default.
        first_message: Opening line, or None/"" for the default.
    """
    return CallRequest(
        number=number.strip(),
        prompt=_or_default(prompt, DEFAULT_PROMPT),
        first_message=_or_default(first_message, DEFAULT_FIRST_MESSAGE),
    )


def call_request_from_arguments(arguments: Mapping[str, Any]) -> CallRequest:
    """Validate raw make_outbound_call arguments and build the request.

    Raises:
        MissingNumber: ``number`` is absent or blank.
    """
    return build_call_request(
        require_number(arguments),
        arguments.get("prompt"),
        arguments.get("first_message"),
    )
