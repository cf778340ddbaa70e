# =============================================================================
# core/patients.py  —  Patient Directory (read-only lookup)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Holds the patient directory used by get_patient_details and
#   call_patient_by_id.  A directory is built once when the server starts
#   and is never changed afterwards: there is no add, update or delete.
#
# WHERE THE DATA COMES FROM:
#   - By default, the three built-in test patients below.
#   - If PATIENT_DIRECTORY_PATH is set, a JSON file with either a list of
#     records or an {id: record} object.
#
# INTERFACE:
#   directory.get(patient_id)  -> PatientRecord | None
#   directory.ids()            -> list of every known id, in load order
# =============================================================================

import json
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from core.errors import DirectoryConfigError
from core.models import PatientRecord


# -----------------------------------------------------------------------------
# Built-in test patients
# -----------------------------------------------------------------------------
# Two patients share a phone number on purpose: it's the test handset.
# -----------------------------------------------------------------------------
_SEED_PATIENTS: tuple[PatientRecord, ...] = (
    PatientRecord(
        id="12345",
        name="John Smith",
        phone_number="+15854836965",
        email="john.smith@email.com",
        last_appointment="2024-12-15",
        next_appointment_due="2025-01-15",
        doctor="Dr. Johnson",
        department="Cardiology",
    ),
    PatientRecord(
        id="67890",
        name="Sarah Williams",
        phone_number="+15854836965",
        email="sarah.williams@email.com",
        last_appointment="2024-11-20",
        next_appointment_due="2025-02-20",
        doctor="Dr. Anderson",
        department="Orthopedics",
    ),
    PatientRecord(
        id="54321",
        name="Michael Brown",
        phone_number="+16693332017",
        email="michael.brown@email.com",
        last_appointment="2024-10-10",
        next_appointment_due="2025-01-10",
        doctor="Dr. Martinez",
        department="General Medicine",
    ),
)


class PatientDirectory:
    """Immutable mapping from patient id to PatientRecord."""

    def __init__(self, records: Iterable[PatientRecord]):
        by_id: dict[str, PatientRecord] = {}
        for record in records:
            if record.id in by_id:
                raise DirectoryConfigError(f"Duplicate patient ID: {record.id}")
            by_id[record.id] = record
        self._records: Mapping[str, PatientRecord] = MappingProxyType(by_id)

    def get(self, patient_id: str) -> PatientRecord | None:
        """Look up a patient by id.

        Returns None for unknown ids.  Pure read: the same id always gives
        the same record.
        """
        return self._records.get(patient_id.strip())

    def ids(self) -> list[str]:
        return list(self._records.keys())

    def __len__(self) -> int:
        return len(self._records)

    @classmethod
    def builtin(cls) -> "PatientDirectory":
        return cls(_SEED_PATIENTS)

    @classmethod
    def from_file(cls, path: str | Path) -> "PatientDirectory":
        """Load a directory from a JSON file.

        Raises:
            DirectoryConfigError: the file is missing, isn't valid JSON, has
                an entry without a required field, or repeats an id.
        """
        try:
            raw = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise DirectoryConfigError(f"Cannot read patient directory {path}: {exc}") from exc

        return cls(_parse_entries(raw, path))


def _parse_entries(raw: Any, path: str | Path) -> list[PatientRecord]:
    if isinstance(raw, dict):
        entries = []
        for key, value in raw.items():
            if not isinstance(value, dict):
                raise DirectoryConfigError(f"Patient entry {key!r} in {path} is not an object")
            # The object key is the id unless the entry names its own.
            entries.append({"id": key, **value})
    elif isinstance(raw, list):
        entries = raw
    else:
        raise DirectoryConfigError(f"Patient directory {path} must be a JSON list or object")

    records = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise DirectoryConfigError(f"Patient entry in {path} is not an object: {entry!r}")
        try:
            records.append(PatientRecord.from_dict(entry))
        except KeyError as exc:
            raise DirectoryConfigError(
                f"Patient entry in {path} is missing field {exc.args[0]!r}"
            ) from exc
    return records


def load_directory(path: str | None = None) -> PatientDirectory:
    """Return the directory from ``path``, or the built-in one if no path is given."""
    if path:
        return PatientDirectory.from_file(path)
    return PatientDirectory.builtin()
