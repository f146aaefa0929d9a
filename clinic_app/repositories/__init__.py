"""Patient storage adapters."""

from clinic_app.repositories.base import PatientRepository
from clinic_app.repositories.memory import InMemoryPatientRepository
from clinic_app.repositories.sql import SQLPatientRepository

__all__ = [
    "InMemoryPatientRepository",
    "PatientRepository",
    "SQLPatientRepository",
]
