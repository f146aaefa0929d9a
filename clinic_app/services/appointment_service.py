"""Appointment service for business logic."""

from datetime import UTC, datetime

import structlog
from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from clinic_app.core.exceptions import NotFoundException
from clinic_app.models.appointments import appointments
from clinic_app.models.patients import patients
from clinic_app.schemas.appointments import AppointmentCreate, AppointmentResponse

logger = structlog.get_logger()


class AppointmentService:
    """Service for managing appointments."""

    def __init__(self, db: AsyncSession):
        """Initialize service with database session."""
        self.db = db

    async def _ensure_patient_exists(self, patient_id: int) -> None:
        result = await self.db.execute(select(patients.c.id).where(patients.c.id == patient_id))
        if result.first() is None:
            raise NotFoundException("Patient not found")

    async def create_appointment(
        self,
        patient_id: int,
        data: AppointmentCreate,
    ) -> AppointmentResponse:
        """
        Create a new appointment.

        Args:
            patient_id: ID of the patient the visit is for
            data: Appointment creation data

        Returns:
            Created appointment

        Raises:
            NotFoundException: If the patient does not exist
        """
        await self._ensure_patient_exists(patient_id)

        values = {
            "patient_id": patient_id,
            "doctor_name": data.doctor_name,
            "appointment_at": data.appointment_at,
            "reason": data.reason,
            "status": data.status,
            "notes": data.notes,
            "created_at": datetime.now(UTC),
        }

        result = await self.db.execute(insert(appointments).values(**values))
        await self.db.commit()

        appointment_id = result.inserted_primary_key[0]
        logger.info("appointment_created", appointment_id=appointment_id, patient_id=patient_id)

        return await self.get_appointment(appointment_id)

    async def get_appointment(self, appointment_id: int) -> AppointmentResponse:
        """
        Get appointment by ID.

        Raises:
            NotFoundException: If appointment not found
        """
        result = await self.db.execute(
            select(appointments).where(appointments.c.id == appointment_id)
        )
        row = result.fetchone()

        if not row:
            raise NotFoundException("Appointment not found")

        return AppointmentResponse.model_validate(dict(row._mapping))

    async def list_for_patient(self, patient_id: int) -> list[AppointmentResponse]:
        """
        List a patient's appointments, earliest first.

        Raises:
            NotFoundException: If the patient does not exist
        """
        await self._ensure_patient_exists(patient_id)

        stmt = (
            select(appointments)
            .where(appointments.c.patient_id == patient_id)
            .order_by(appointments.c.appointment_at.asc(), appointments.c.id.asc())
        )
        result = await self.db.execute(stmt)

        return [AppointmentResponse.model_validate(dict(row._mapping)) for row in result.fetchall()]
