import json

import pytest

from core.errors import DirectoryConfigError
from core.models import PatientRecord
from core.patients import PatientDirectory, load_directory


def test_builtin_directory_has_test_patients(directory):
    assert directory.ids() == ["12345", "67890", "54321"]

    patient = directory.get("12345")
    assert patient.name == "John Smith"
    assert patient.phone_number == "+15854836965"
    assert patient.department == "Cardiology"
    assert patient.doctor == "Dr. Johnson"


def test_lookup_trims_and_misses_cleanly(directory):
    assert directory.get(" 54321 ").name == "Michael Brown"
    assert directory.get("99999") is None


def test_lookup_is_repeatable(directory):
    assert directory.get("67890") is directory.get("67890")


def test_records_cannot_be_modified(directory):
    with pytest.raises(AttributeError):
        directory.get("12345").name = "Someone Else"


def test_duplicate_ids_are_rejected():
    record = PatientDirectory.builtin().get("12345")
    with pytest.raises(DirectoryConfigError, match="Duplicate patient ID: 12345"):
        PatientDirectory([record, record])


def test_load_from_camel_case_mapping(tmp_path):
    path = tmp_path / "patients.json"
    path.write_text(json.dumps({
        "A1": {
            "name": "Ada Lovelace",
            "phoneNumber": "+442079460000",
            "email": "ada@example.com",
            "lastAppointment": "2025-03-01",
            "nextAppointmentDue": "2025-09-01",
            "doctor": "Dr. Babbage",
            "department": "Neurology",
        }
    }))

    directory = load_directory(str(path))

    assert directory.ids() == ["A1"]
    assert directory.get("A1") == PatientRecord(
        id="A1",
        name="Ada Lovelace",
        phone_number="+442079460000",
        email="ada@example.com",
        last_appointment="2025-03-01",
        next_appointment_due="2025-09-01",
        doctor="Dr. Babbage",
        department="Neurology",
    )


def test_load_from_snake_case_list(tmp_path):
    path = tmp_path / "patients.json"
    path.write_text(json.dumps([{
        "id": 7,
        "name": "Grace Hopper",
        "phone_number": "+12025550100",
        "last_appointment": "2025-01-01",
        "next_appointment_due": "2025-07-01",
        "doctor": "Dr. Cobol",
        "department": "Cardiology",
    }]))

    patient = PatientDirectory.from_file(path).get("7")

    assert patient.name == "Grace Hopper"
    assert patient.email == ""


def test_missing_field_is_a_config_error(tmp_path):
    path = tmp_path / "patients.json"
    path.write_text(json.dumps([{"id": "1", "name": "No Phone"}]))

    with pytest.raises(DirectoryConfigError, match="phone_number"):
        PatientDirectory.from_file(path)


def test_blank_phone_number_is_a_config_error(tmp_path):
    path = tmp_path / "patients.json"
    path.write_text(json.dumps([{
        "id": "1",
        "name": "Blank Phone",
        "phone_number": "  ",
        "last_appointment": "2025-01-01",
        "next_appointment_due": "2025-07-01",
        "doctor": "Dr. Nobody",
        "department": "Cardiology",
    }]))

    with pytest.raises(DirectoryConfigError, match="phone_number"):
        PatientDirectory.from_file(path)


@pytest.mark.parametrize("content", ["not json", "42"])
def test_unreadable_file_is_a_config_error(tmp_path, content):
    path = tmp_path / "patients.json"
    path.write_text(content)

    with pytest.raises(DirectoryConfigError):
        PatientDirectory.from_file(path)


def test_missing_file_is_a_config_error(tmp_path):
    with pytest.raises(DirectoryConfigError):
        load_directory(str(tmp_path / "nope.json"))


def test_no_path_means_builtin():
    assert load_directory(None).ids() == PatientDirectory.builtin().ids()
