# =============================================================================
# core/validation.py  —  Request Validator
# =============================================================================
#
# Rejects unusable arguments before anything leaves the process.
#
# Only presence is checked.  Any non-empty phone number is accepted; getting
# the format right (country code, digits) is the caller's job.
# =============================================================================

from typing import Any, Mapping

from core.errors import MissingIdentifier, MissingNumber


def _clean(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def require_number(arguments: Mapping[str, Any]) -> str:
    """Return the trimmed ``number`` argument or raise MissingNumber."""
    number = _clean(arguments.get("number"))
    if not number:
        raise MissingNumber()
    return number


def require_patient_id(arguments: Mapping[str, Any]) -> str:
    """Return the trimmed ``patient_id`` argument or raise MissingIdentifier."""
    patient_id = _clean(arguments.get("patient_id"))
    if not patient_id:
        raise MissingIdentifier()
    return patient_id
