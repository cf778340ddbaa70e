# =============================================================================
# core/errors.py  —  Error Taxonomy
# =============================================================================
#
# Every failure the call server knows about is one of these classes.
#
#   UnknownTool        →  the caller named a tool we don't have.  This is the
#                         ONLY error that escapes as a protocol-level error.
#   MissingNumber      →  make_outbound_call without a usable phone number
#   MissingIdentifier  →  a patient tool without a patient_id
#   ExternalApiError   →  the outbound-call API failed or was unreachable
#   DirectoryConfigError → a bad patient directory file (start-up only)
#
# Everything except UnknownTool is caught at the edge of a tool flow and
# turned into formatted text by core/formatting.py.
# =============================================================================

from typing import Optional


class OutboundCallError(Exception):
    """Base class for all call-server errors."""


class UnknownTool(OutboundCallError):
    """Raised when a tool name is not in the catalog."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class ValidationError(OutboundCallError):
    """Caller supplied arguments that cannot be used."""


class MissingNumber(ValidationError):
    def __init__(self):
        super().__init__("Phone number is required")


class MissingIdentifier(ValidationError):
    def __init__(self):
        super().__init__("Patient ID is required")


class ExternalApiError(OutboundCallError):
    """The outbound-call API returned a non-2xx status or could not be reached.

    For HTTP failures ``status_code``, ``reason`` and ``body`` are set and
    the message reads ``API call failed: <status> <reason> - <body>``.
    For transport failures only the message is set.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        reason: Optional[str] = None,
        body: Optional[str] = None,
    ):
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(message)

    @classmethod
    def from_status(cls, status_code: int, reason: str, body: str) -> "ExternalApiError":
        return cls(
            f"API call failed: {status_code} {reason} - {body}",
            status_code=status_code,
            reason=reason,
            body=body,
        )


class DirectoryConfigError(OutboundCallError):
    """The patient directory file could not be loaded."""
