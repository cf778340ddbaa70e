# =============================================================================
# core/formatting.py  —  Response Formatter
# =============================================================================
#
# Every tool answer is a block of Markdown-ish text meant for a human
# operator (or the LLM relaying to one).  This module is the ONLY place
# that decides what those blocks look like, including how each error kind
# is presented.
#
# None of these functions raise.
# =============================================================================

from typing import Iterable

from core.models import CallRequest, CallResult, PatientRecord

_MISSING = "N/A"


def _or_placeholder(value: object) -> str:
    return _MISSING if value is None or value == "" else str(value)


# -----------------------------------------------------------------------------
# Direct call
# -----------------------------------------------------------------------------
def format_call_success(request: CallRequest, result: CallResult) -> str:
    """Render a completed API call, including the texts actually sent."""
    status = "Success" if result.success else "Failed"
    return (
        "✅ Call initiated successfully!\n"
        "\n"
        "📞 **Call Details:**\n"
        f"- **Number:** {request.number}\n"
        f"- **Call SID:** {_or_placeholder(result.call_sid)}\n"
        f"- **Status:** {status}\n"
        "\n"
        "🤖 **AI Agent Configuration:**\n"
        f"- **Prompt:** {request.prompt}\n"
        f"- **First Message:** {request.first_message}\n"
        "\n"
        "The call is now in progress. The recipient should receive the call shortly."
    )


def format_call_failure(number: object, error: BaseException, api_url: str) -> str:
    """Render a failed direct call with the operator checklist."""
    return (
        f"❌ Failed to initiate call to {_or_placeholder(number)}\n"
        "\n"
        f"**Error:** {error}\n"
        "\n"
        "Please check:\n"
        f"- Your API server is running at {api_url}\n"
        "- The phone number format is correct (include country code)\n"
        "- Your Twilio and ElevenLabs credentials are properly configured"
    )


# -----------------------------------------------------------------------------
# Patient directory
# -----------------------------------------------------------------------------
def format_patient_details(patient: PatientRecord) -> str:
    return (
        "👤 **Patient Details Found**\n"
        "\n"
        f"**Patient ID:** {patient.id}\n"
        f"**Name:** {patient.name}\n"
        f"**Phone:** {patient.phone_number}\n"
        f"**Email:** {patient.email}\n"
        f"**Last Appointment:** {patient.last_appointment}\n"
        f"**Next Appointment Due:** {patient.next_appointment_due}\n"
        f"**Assigned Doctor:** {patient.doctor}\n"
        f"**Department:** {patient.department}"
    )


def format_patient_not_found(patient_id: str, known_ids: Iterable[str]) -> str:
    """Render a miss, listing every id the directory does have."""
    return (
        f"❌ Patient not found with ID: {patient_id}\n"
        "\n"
        f"Available test patient IDs: {', '.join(known_ids)}"
    )


def format_patient_call(patient: PatientRecord, call_purpose: str, call_text: str) -> str:
    """Prefix a call result with the patient summary block."""
    return (
        "🏥 **Patient Call Initiated**\n"
        "\n"
        "📋 **Patient Information:**\n"
        f"- **Name:** {patient.name}\n"
        f"- **ID:** {patient.id}\n"
        f"- **Department:** {patient.department}\n"
        f"- **Doctor:** {patient.doctor}\n"
        f"- **Call Purpose:** {call_purpose}\n"
        "\n"
        f"{call_text}"
    )


def format_patient_call_failure(patient_id: object, error: BaseException) -> str:
    return (
        f"❌ Failed to call patient with ID {_or_placeholder(patient_id)}\n"
        "\n"
        f"**Error:** {error}"
    )


def format_lookup_failure(patient_id: object, error: BaseException) -> str:
    return (
        f"❌ Could not look up patient {_or_placeholder(patient_id)}\n"
        "\n"
        f"**Error:** {error}"
    )
