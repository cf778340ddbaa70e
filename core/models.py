# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the shape of every piece of information that flows
# through the call server:
#
#   PatientRecord  →  a directory entry (who we are calling and why)
#   CallRequest    →  the exact JSON body sent to the outbound-call API
#   CallResult     →  what the outbound-call API sends back
#   ToolResponse   →  the text envelope handed back to the MCP caller
#
# All of them are frozen.  Nothing in this server mutates a record once it
# has been built; a new request or result is created for every invocation.
# =============================================================================

from dataclasses import dataclass
from typing import Any, Optional


# -----------------------------------------------------------------------------
# PatientRecord: one entry in the patient directory
# -----------------------------------------------------------------------------
# Used only by the lookup tools.  The directory hands these out read-only.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class PatientRecord:
    """A patient and their care context."""

    id: str                            # Unique directory key, e.g. "12345"
    name: str                          # "John Smith"
    phone_number: str                  # Dialable number incl. country code
    email: str
    last_appointment: str              # ISO date, e.g. "2024-12-15"
    next_appointment_due: str          # ISO date
    doctor: str                        # Assigned provider, e.g. "Dr. Johnson"
    department: str                    # "Cardiology"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PatientRecord":
        """Build a record from a JSON object.

        Accepts both snake_case keys and camelCase keys
        (``phoneNumber``, ``lastAppointment``,
        ``nextAppointmentDue``).  A blank value counts as missing.
        """
        def pick(snake: str, camel: str) -> str:
            value = data.get(snake, data.get(camel))
            if value is None or not str(value).strip():
                raise KeyError(snake)
            return str(value)

        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            phone_number=pick("phone_number", "phoneNumber"),
            email=str(data.get("email", "")),
            last_appointment=pick("last_appointment", "lastAppointment"),
            next_appointment_due=pick("next_appointment_due", "nextAppointmentDue"),
            doctor=str(data["doctor"]),
            department=str(data["department"]),
        )


# -----------------------------------------------------------------------------
# CallRequest: the outbound API payload
# -----------------------------------------------------------------------------
# Field names match the wire format exactly so that to_payload() is a
# straight copy.  Every field is always populated (see core/payload.py).
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class CallRequest:
    """A normalized request for the outbound-call endpoint."""

    number: str                        # Trimmed, never empty
    prompt: str                        # Instructions for the voice agent
    first_message: str                 # First utterance when the call connects

    def to_payload(self) -> dict[str, str]:
        return {
            "number": self.number,
            "prompt": self.prompt,
            "first_message": self.first_message,
        }


# -----------------------------------------------------------------------------
# CallResult: the provider's answer
# -----------------------------------------------------------------------------
# The API replies with {"success": bool, "callSid": str}.  Nothing here is
# validated: a missing field stays None and the formatter shows a placeholder.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class CallResult:
    """Outcome of one outbound-call API invocation."""

    success: bool
    call_sid: Optional[str] = None

    @classmethod
    def from_response(cls, data: Any) -> "CallResult":
        if not isinstance(data, dict):
            return cls(success=False)
        call_sid = data.get("callSid")
        return cls(
            success=bool(data.get("success", False)),
            call_sid=None if call_sid is None else str(call_sid),
        )


# -----------------------------------------------------------------------------
# ToolResponse: the envelope returned for every named tool
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolResponse:
    """A single block of human-readable text returned to the agent host."""

    text: str
