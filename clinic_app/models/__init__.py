"""Database models."""

from clinic_app.models.appointments import appointments
from clinic_app.models.patients import metadata, patients

__all__ = [
    "appointments",
    "metadata",
    "patients",
]
