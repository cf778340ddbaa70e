# =============================================================================
# core/invoker.py  —  Outbound Call Invoker
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Sends ONE CallRequest to the outbound-call API and turns the answer into
#   a CallResult, or raises ExternalApiError.
#
#   POST {api_url}/outbound-call
#   Content-Type: application/json
#   {"number": ..., "prompt": ..., "first_message": ...}
#
# RULES:
#   - Exactly one HTTP request per place_call().  No retries.
#   - A fresh httpx.AsyncClient per call; nothing is pooled between calls.
#   - No timeout override: httpx's default applies.
#   - Non-2xx → ExternalApiError with status, reason phrase and raw body.
#   - Connection refused / DNS / timeout → ExternalApiError with the
#     transport's message.
#   - 2xx → the JSON body is read as-is; missing fields become None.
# =============================================================================

import logging
from typing import Optional

import httpx

from core.errors import ExternalApiError
from core.models import CallRequest, CallResult

logger = logging.getLogger(__name__)


class OutboundCallInvoker:
    """Client for the outbound-call endpoint."""

    def __init__(self, api_url: str, transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Args:
            api_url: Base URL of the API, without the /outbound-call path.
            transport: Optional httpx transport.  Tests pass an
                       httpx.MockTransport here; production uses the default.
        """
        self.api_url = api_url.rstrip("/")
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self.api_url}/outbound-call"

    async def place_call(self, request: CallRequest) -> CallResult:
        """POST the request and return the provider's result.

        Raises:
            ExternalApiError: on a non-2xx status, a transport failure, or a
                success body that isn't JSON.
        """
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(
                    self.endpoint,
                    json=request.to_payload(),
                    headers={"Content-Type": "application/json"},
                )
        except httpx.HTTPError as exc:
            logger.error(f"Error making outbound call: {exc!r}")
            raise ExternalApiError(str(exc) or exc.__class__.__name__) from exc

        if not response.is_success:
            logger.error(
                f"Outbound call API returned {response.status_code} {response.reason_phrase}"
            )
            raise ExternalApiError.from_status(
                response.status_code, response.reason_phrase, response.text
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise ExternalApiError(f"Invalid JSON from outbound call API: {exc}") from exc

        return CallResult.from_response(data)
