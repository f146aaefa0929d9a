"""Patient schemas for request/response validation."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, computed_field, field_validator

PHONE_SEPARATORS = ("-", " ", "(", ")", "+", ".")
MIN_PHONE_DIGITS = 7


class PatientBase(BaseModel):
    """Fields supplied when registering or replacing a patient."""

    model_config = ConfigDict(str_strip_whitespace=True)

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    date_of_birth: date
    phone_number: str = Field(..., min_length=MIN_PHONE_DIGITS, max_length=20)
    email: EmailStr = Field(..., max_length=255)
    address: str = Field(..., min_length=1, max_length=500)
    medical_history: str = Field(default="", max_length=2000)

    @field_validator("phone_number")
    @classmethod
    def validate_phone(cls, v: str) -> str:
        """Validate phone number format."""
        cleaned = v
        for separator in PHONE_SEPARATORS:
            cleaned = cleaned.replace(separator, "")
        if not cleaned.isdigit():
            raise ValueError("Phone number must contain only digits and separators")
        if len(cleaned) < MIN_PHONE_DIGITS:
            raise ValueError(f"Phone number must have at least {MIN_PHONE_DIGITS} digits")
        return v

    @field_validator("medical_history", mode="before")
    @classmethod
    def default_medical_history(cls, v: str | None) -> str:
        """Treat a missing medical history as empty text."""
        return "" if v is None else v


class PatientCreate(PatientBase):
    """Schema for registering a new patient."""


class PatientUpdate(PatientBase):
    """Schema for replacing every editable field of a patient."""


class PatientResponse(PatientBase):
    """Patient response schema."""

    id: int
    registration_date: datetime

    model_config = ConfigDict(from_attributes=True, str_strip_whitespace=True)

    @computed_field
    @property
    def full_name(self) -> str:
        """First and last name joined for display."""
        return f"{self.first_name} {self.last_name}"


class PatientCreatedResponse(BaseModel):
    """Identifier assigned to a newly registered patient."""

    id: int
    message: str = "Patient registered successfully"


class EmailAvailabilityResponse(BaseModel):
    """Result of an email uniqueness check."""

    email: str
    available: bool
