"""Appointment schemas for request/response validation."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from clinic_app.models.appointments import DEFAULT_APPOINTMENT_STATUS


class AppointmentBase(BaseModel):
    """Base appointment schema with common fields."""

    model_config = ConfigDict(str_strip_whitespace=True)

    doctor_name: str = Field(..., min_length=1, max_length=100)
    appointment_at: datetime
    reason: str = Field(..., min_length=1, max_length=500)
    status: str = Field(default=DEFAULT_APPOINTMENT_STATUS, min_length=1, max_length=50)
    notes: str = Field(default="", max_length=1000)

    @field_validator("notes", mode="before")
    @classmethod
    def default_notes(cls, v: str | None) -> str:
        """Treat missing notes as empty text."""
        return "" if v is None else v


class AppointmentCreate(AppointmentBase):
    """Schema for booking an appointment for a patient."""


class AppointmentResponse(AppointmentBase):
    """Schema for appointment response."""

    id: int
    patient_id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True, str_strip_whitespace=True)
