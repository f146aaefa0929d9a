"""Tests for patient request validation."""

from datetime import date

import pytest
from pydantic import ValidationError

from clinic_app.schemas.patients import PatientCreate


def _valid_payload(**overrides) -> dict:
    payload = {
        "first_name": "John",
        "last_name": "Doe",
        "date_of_birth": date(1990, 1, 15),
        "phone_number": "555-123-4567",
        "email": "john.doe@example.com",
        "address": "123 Main Street",
        "medical_history": "No known allergies",
    }
    payload.update(overrides)
    return payload


def _error_fields(exc: ValidationError) -> set[str]:
    return {str(error["loc"][0]) for error in exc.errors()}


def test_valid_patient():
    """Test a complete payload is accepted as given."""
    patient = PatientCreate(**_valid_payload())

    assert patient.first_name == "John"
    assert patient.date_of_birth == date(1990, 1, 15)
    assert patient.phone_number == "555-123-4567"
    assert patient.medical_history == "No known allergies"


def test_medical_history_is_optional():
    """Test medical history defaults to empty text."""
    payload = _valid_payload()
    del payload["medical_history"]

    assert PatientCreate(**payload).medical_history == ""
    assert PatientCreate(**_valid_payload(medical_history=None)).medical_history == ""


def test_required_fields_missing():
    """Test every required field is reported when absent."""
    with pytest.raises(ValidationError) as exc_info:
        PatientCreate()

    assert {
        "first_name",
        "last_name",
        "date_of_birth",
        "phone_number",
        "email",
        "address",
    } <= _error_fields(exc_info.value)


def test_blank_names_rejected():
    """Test whitespace-only text does not satisfy a required field."""
    with pytest.raises(ValidationError) as exc_info:
        PatientCreate(**_valid_payload(first_name="  ", address=""))

    assert _error_fields(exc_info.value) == {"first_name", "address"}


@pytest.mark.parametrize(
    ("email", "expected_valid"),
    [
        ("", False),
        ("invalid-email", False),
        ("test@", False),
        ("test@example.com", True),
        ("user.name+tag@example.co.uk", True),
    ],
)
def test_email_validation(email, expected_valid):
    """Test email format checking."""
    if expected_valid:
        assert PatientCreate(**_valid_payload(email=email)).email == email
    else:
        with pytest.raises(ValidationError) as exc_info:
            PatientCreate(**_valid_payload(email=email))
        assert "email" in _error_fields(exc_info.value)


@pytest.mark.parametrize(
    ("phone", "expected_valid"),
    [
        ("555-123-4567", True),
        ("+1 (555) 123.4567", True),
        ("5551234", True),
        ("555-12", False),
        ("555-CALL-NOW", False),
        ("1" * 21, False),
    ],
)
def test_phone_validation(phone, expected_valid):
    """Test phone number format checking."""
    if expected_valid:
        assert PatientCreate(**_valid_payload(phone_number=phone)).phone_number == phone
    else:
        with pytest.raises(ValidationError) as exc_info:
            PatientCreate(**_valid_payload(phone_number=phone))
        assert "phone_number" in _error_fields(exc_info.value)


def test_length_limits():
    """Test bounded text fields."""
    with pytest.raises(ValidationError) as exc_info:
        PatientCreate(
            **_valid_payload(
                last_name="x" * 101,
                address="y" * 501,
                medical_history="z" * 2001,
            )
        )

    assert _error_fields(exc_info.value) == {"last_name", "address", "medical_history"}


def test_email_domain_is_normalized():
    """Test the email keeps its local part but lowercases the domain."""
    patient = PatientCreate(**_valid_payload(email="John.Doe@EXAMPLE.COM"))

    assert patient.email == "John.Doe@example.com"
