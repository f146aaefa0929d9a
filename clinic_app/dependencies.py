"""FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from clinic_app.database import get_db
from clinic_app.repositories.base import PatientRepository
from clinic_app.repositories.sql import SQLPatientRepository
from clinic_app.services.appointment_service import AppointmentService
from clinic_app.services.patient_service import PatientService


def get_patient_repository(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PatientRepository:
    """Get the patient repository bound to the request's session."""
    return SQLPatientRepository(db)


def get_patient_service(
    repository: Annotated[PatientRepository, Depends(get_patient_repository)],
) -> PatientService:
    """Get patient service instance."""
    return PatientService(repository)


def get_appointment_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> AppointmentService:
    """Get appointment service instance."""
    return AppointmentService(db)


# Type aliases for dependency injection
PatientServiceDep = Annotated[PatientService, Depends(get_patient_service)]
AppointmentServiceDep = Annotated[AppointmentService, Depends(get_appointment_service)]
